# Python imports
import collections
import errno
import logging
import os
import sys

# 3rd party modules
import posix_ipc

# Project imports
from pqadmin.syscalls import PosixPlatform

logger = logging.getLogger(__name__)

# Where the kernel's message queue filesystem is customarily mounted on Linux. See mq_overview(7).
MOUNT_POINT = "/dev/mqueue"
FILESYSTEM_TYPE = "mqueue"
# mount(2) ignores the source for pseudo-filesystems, but it must be a string.
MOUNT_SOURCE = "none"

NO_QUEUES_MESSAGE = "(No posix queues)"

# Errors that can come back from opening, querying, closing or unlinking a queue. posix_ipc
# raises ValueError when the OS rejects a name (no leading slash, or longer than NAME_MAX).
QUEUE_ERRORS = (posix_ipc.Error, OSError, ValueError)


def _say_error(s):
    print(f"Error: {s}", file=sys.stderr)


def _reason(exc):
    """Returns the human-readable part of an exception, e.g. 'No such file or directory'."""
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    return str(exc)


class QueueAttributes(collections.namedtuple("QueueAttributes",
                                             "flags max_messages max_message_size current_messages")):
    """A queue's mq_attr as read from an open handle. It's stale as soon as it's created.

    posix_ipc calls mq_getattr() once per property, so the fields come from four separate
    reads rather than one atomic one. Only curmsgs can change between them.
    """
    __slots__ = ()

    @classmethod
    def from_queue(cls, mq):
        # mq_flags can only ever hold O_NONBLOCK. posix_ipc reports it inverted, as block.
        flags = 0 if mq.block else os.O_NONBLOCK
        return cls(flags, mq.max_messages, mq.max_message_size, mq.current_messages)

    def format(self):
        return (f"flags   {self.flags}\n"
                f"maxmsg  {self.max_messages}\n"
                f"msgsize {self.max_message_size}\n"
                f"curmsgs {self.current_messages}")


class QueueAdmin:
    """Administers the POSIX message queue filesystem mounted at mount_point.

    Each public method performs one operation, prints its output to stdout and any
    diagnostics to stderr, and returns True on success or False on failure. None of them
    raise for OS-level failures.
    """
    def __init__(self, mount_point=MOUNT_POINT, platform=None):
        self.mount_point = mount_point
        self.platform = platform if platform is not None else PosixPlatform()

    def ensure_mounted(self):
        """Creates the mount point and mounts the queue filesystem on it, unless that's
        already been done.
        """
        try:
            self.platform.mkdir(self.mount_point)
        except OSError as exc:
            if exc.errno != errno.EEXIST:
                _say_error(f"Couldn't create posix filesystem mount point {self.mount_point} "
                           f"({_reason(exc)})")
                return False
            logger.debug("%s already exists", self.mount_point)

        try:
            self.platform.mount(MOUNT_SOURCE, self.mount_point, FILESYSTEM_TYPE)
        except OSError as exc:
            # EBUSY here (probably) means that the filesystem is already mounted.
            if exc.errno != errno.EBUSY:
                _say_error(f"Couldn't mount the posix queue filesystem ({_reason(exc)})")
                return False
            logger.debug("%s is already mounted", self.mount_point)

        return True

    def list_queues(self):
        try:
            entries = self.platform.scandir(self.mount_point)
        except OSError as exc:
            _say_error(f"Couldn't read from the posix queue filesystem ({_reason(exc)})")
            return False

        count = 0
        with entries:
            for entry in entries:
                if entry.name.startswith('.') or entry.is_dir(follow_symlinks=False):
                    continue
                print(entry.name)
                count += 1

        if not count:
            print(NO_QUEUES_MESSAGE)

        return True

    def stat_queue(self, queue_name):
        try:
            mq = self.platform.open_queue(queue_name)
        except QUEUE_ERRORS as exc:
            _say_error(f"Couldn't open queue {queue_name} ({_reason(exc)})")
            return False

        try:
            attributes = QueueAttributes.from_queue(mq)
        except QUEUE_ERRORS as exc:
            _say_error(f"Failed to query queue {queue_name} for its parameters ({_reason(exc)})")
            self._close_queue(mq, queue_name)
            return False

        if not self._close_queue(mq, queue_name):
            return False

        print(attributes.format())
        return True

    def _close_queue(self, mq, queue_name):
        try:
            mq.close()
        except QUEUE_ERRORS as exc:
            _say_error(f"Failed to close queue {queue_name} ({_reason(exc)})")
            return False
        return True

    def unlink_queue(self, queue_name):
        try:
            self.platform.unlink_queue(queue_name)
        except QUEUE_ERRORS as exc:
            _say_error(f"Failed to unlink queue {queue_name} ({_reason(exc)})")
            return False

        logger.debug("unlinked %s", queue_name)
        return True

    def unmount(self):
        """Unmounts the queue filesystem and removes the mount point.

        If the filesystem is in use, it stays mounted and this still counts as success. The
        caller can try again later.
        """
        try:
            self.platform.umount(self.mount_point)
        except OSError as exc:
            if exc.errno != errno.EBUSY:
                _say_error(f"Couldn't unmount the posix queue filesystem ({_reason(exc)})")
                return False
            print(f"Note: the posix queue filesystem is busy; leaving {self.mount_point} mounted",
                  file=sys.stderr)
            return True

        try:
            self.platform.rmdir(self.mount_point)
        except OSError as exc:
            if exc.errno != errno.EBUSY:
                _say_error(f"Couldn't remove posix filesystem mount point {self.mount_point} "
                           f"({_reason(exc)})")
                return False
            logger.debug("%s is busy; not removed", self.mount_point)

        return True
