# Python imports
import errno
import os
import unittest

# Project imports
import pqadmin
from pqadmin import syscalls
# Hack -- add tests directory to sys.path so Python 3 can find base.py.
import sys
sys.path.insert(0, os.path.join(os.getcwd(), 'tests'))  # noqa - tell flake8 to chill
import base as tests_base


class TestModuleConstants(tests_base.Base):
    """Check that the pqadmin module-level constants are defined as expected"""
    def test_constant_values(self):
        """test that constants are what I expect"""
        self.assertEqual(pqadmin.MOUNT_POINT, "/dev/mqueue")
        self.assertEqual(pqadmin.FILESYSTEM_TYPE, "mqueue")
        self.assertEqual(pqadmin.NO_QUEUES_MESSAGE, "(No posix queues)")

        self.assertIsInstance(pqadmin.VERSION, str)
        self.assertIsInstance(pqadmin.__version__, str)
        self.assertEqual(pqadmin.VERSION, pqadmin.__version__)
        self.assertIsInstance(pqadmin.__author__, str)
        self.assertIsInstance(pqadmin.__license__, str)
        self.assertIsInstance(pqadmin.__copyright__, str)

    def test_commands(self):
        self.assertEqual([command.value for command in pqadmin.Command],
                         ["ls", "stat", "unlink", "umount"])


class TestModuleErrors(tests_base.Base):
    """Exercise the exceptions defined by the module"""
    def test_errors(self):
        self.assertTrue(issubclass(pqadmin.CommandLineError, Exception))
        self.assertTrue(issubclass(pqadmin.UsageError, pqadmin.CommandLineError))
        self.assertTrue(issubclass(pqadmin.UnknownCommandError, pqadmin.CommandLineError))


@unittest.skipUnless(sys.platform.startswith('linux'), 'mount(2) via libc is Linux-only')
class TestPosixPlatform(tests_base.Base):
    """Exercise the parts of PosixPlatform that don't need root"""
    def setUp(self):
        self.platform = pqadmin.PosixPlatform()

    def test_libc_loaded_once(self):
        self.assertIs(syscalls._get_libc(), syscalls._get_libc())

    def test_umount_error_carries_errno(self):
        """tests that a failed umount() raises OSError with the errno from libc"""
        with self.assertRaises(OSError) as context:
            self.platform.umount("/pqadmin/does/not/exist")

        # Root gets ENOENT, everyone else EPERM.
        self.assertIn(context.exception.errno, (errno.ENOENT, errno.EPERM))
        self.assertEqual(context.exception.filename, "/pqadmin/does/not/exist")

    def test_mkdir_existing(self):
        with self.assertRaises(OSError) as context:
            self.platform.mkdir("/")
        self.assertEqual(context.exception.errno, errno.EEXIST)


if __name__ == '__main__':
    unittest.main()
