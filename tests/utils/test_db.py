from marketplace.utils.db import drop_db, setup_db


def test_memory_provider_needs_no_schema(marketplace_bed):
    from marketplace.domain import marketplace

    assert setup_db(marketplace) == 0
    assert drop_db(marketplace) == 0
