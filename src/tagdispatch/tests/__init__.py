from unittest import TestSuite


def test_suite():

    from tagdispatch.tests import test_tags, test_table, test_dispatch
    from tagdispatch.tests import test_functions, test_objects, test_logging

    tests = [
        test_tags.test_suite(),
        test_table.test_suite(),
        test_dispatch.test_suite(),
        test_functions.test_suite(),
        test_objects.test_suite(),
        test_logging.test_suite(),
    ]

    return TestSuite(
        tests
    )

test_suite.__test__ = False
