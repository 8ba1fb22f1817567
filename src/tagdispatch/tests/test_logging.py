"""Tests for logging of registrations and dispatch"""

import io
import logging
from unittest import TestCase, TestSuite, defaultTestLoader

from tagdispatch import Registry, NoApplicableMethod
from tagdispatch.logconfig import LOGGER_NAME, setup_logging, disable_logging
from tagdispatch.logconfig import levelNumber


class LoggingTests(TestCase):

    def testLibraryIsSilentByDefault(self):
        logger = logging.getLogger(LOGGER_NAME)
        self.assertTrue(
            [h for h in logger.handlers if isinstance(h, logging.NullHandler)]
        )

    def testRegistrationAndDispatchAreLogged(self):
        registry = Registry()
        with self.assertLogs(LOGGER_NAME, level='DEBUG') as cm:
            registry.register('summary', 'lm', lambda v: v)
            registry.register('summary', 'lm', lambda v: v)
            registry.seal('summary', 'glm')
            self.assertRaises(NoApplicableMethod,
                registry.invoke, 'summary', object())
        output = "\n".join(cm.output)
        self.assertTrue("Registering method for 'summary'" in output)
        self.assertTrue("Replacing method for 'summary'" in output)
        self.assertTrue("Sealed 'summary'" in output)
        self.assertTrue("No method for 'summary'" in output)

    def testSetupLogging(self):
        stream = io.StringIO()
        try:
            setup_logging("DEBUG", format="%(name)s %(message)s",
                stream=stream, force=True)
            Registry().registerDefault('center', len)
        finally:
            disable_logging()
            logger = logging.getLogger(LOGGER_NAME)
            logger.setLevel(logging.NOTSET)
            logger.propagate = True
        self.assertEqual(
            stream.getvalue(),
            "tagdispatch.table Registering default for 'center'\n"
        )

    def testNumericAndNamedLevels(self):
        stream = io.StringIO()
        try:
            logger = setup_logging(logging.WARNING, format="%(message)s",
                stream=stream, force=True)
            self.assertEqual(logger.level, logging.WARNING)
            Registry().registerDefault('center', len)
            self.assertEqual(setup_logging("debug", stream=False,
                force=True).level, logging.DEBUG)
        finally:
            disable_logging()
            logger = logging.getLogger(LOGGER_NAME)
            logger.setLevel(logging.NOTSET)
            logger.propagate = True
        self.assertEqual(stream.getvalue(), "")
        self.assertEqual(levelNumber(15), 15)
        self.assertRaises(ValueError, levelNumber, "LOUD")
        self.assertRaises(ValueError, setup_logging, "LOUD")


TestClasses = (
    LoggingTests,
)

def test_suite():
    return TestSuite(
        [defaultTestLoader.loadTestsFromTestCase(t) for t in TestClasses]
    )

test_suite.__test__ = False     # for unittest loaders, not a test itself
