"""Command-line administration of the Linux POSIX message queue filesystem.

pqadmin mounts the mqueue filesystem at /dev/mqueue when needed and can list queues, show
a queue's attributes, unlink a queue and unmount the filesystem again.
"""
import os

from pqadmin.admin import (MOUNT_POINT, FILESYSTEM_TYPE, NO_QUEUES_MESSAGE,  # noqa: F401
                           QueueAdmin, QueueAttributes)
from pqadmin.cli import (Command, CommandLineError, UsageError,  # noqa: F401
                         UnknownCommandError, main)
from pqadmin.syscalls import PosixPlatform  # noqa: F401


def _read_version():
    path = os.path.join(os.path.dirname(__file__), "VERSION")
    with open(path) as f:
        return f.read().strip()


VERSION = _read_version()

__version__ = VERSION
__author__ = "The pqadmin authors"
__license__ = "BSD-3-Clause"
__copyright__ = "Copyright (c) The pqadmin authors"
