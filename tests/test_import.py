# A real basic test to check that the import does not fail.


def test_import():
    try:
        import lboost  # noqa

        failed = False
    except Exception:
        failed = True

    assert not failed, "Import failed with Exception."
