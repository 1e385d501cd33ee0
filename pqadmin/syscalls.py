# Python imports
import ctypes
import ctypes.util
import logging
import os

# 3rd party modules
import posix_ipc

logger = logging.getLogger(__name__)

# Python's os module doesn't wrap mount(2) or umount(2), so I call them in libc directly.
# use_errno=True makes ctypes capture errno right after each call, which is what lets the
# caller distinguish EBUSY from everything else.
_libc = None


def _get_libc():
    global _libc

    if _libc is None:
        _libc = ctypes.CDLL(ctypes.util.find_library("c") or "libc.so.6", use_errno=True)
        _libc.mount.argtypes = (ctypes.c_char_p, ctypes.c_char_p, ctypes.c_char_p,
                                ctypes.c_ulong, ctypes.c_void_p)
        _libc.mount.restype = ctypes.c_int
        _libc.umount.argtypes = (ctypes.c_char_p, )
        _libc.umount.restype = ctypes.c_int

    return _libc


def _raise_last_error(path):
    """Turns the errno captured by ctypes into an OSError like the ones os.mkdir() raises."""
    err = ctypes.get_errno()
    raise OSError(err, os.strerror(err), path)


class PosixPlatform:
    """The OS calls that QueueAdmin needs.

    Every method raises OSError (or, for queue operations, one of the posix_ipc exceptions)
    on failure and leaves it to the caller to decide which errors are harmless.
    """
    def mkdir(self, path, mode=0o755):
        logger.debug("mkdir(%s, %o)", path, mode)
        os.mkdir(path, mode)

    def rmdir(self, path):
        logger.debug("rmdir(%s)", path)
        os.rmdir(path)

    def mount(self, source, target, filesystem_type, flags=0):
        logger.debug("mount(%s, %s, %s, %d)", source, target, filesystem_type, flags)
        result = _get_libc().mount(source.encode(), target.encode(),
                                   filesystem_type.encode(), flags, None)
        if result:
            _raise_last_error(target)

    def umount(self, target):
        logger.debug("umount(%s)", target)
        if _get_libc().umount(target.encode()):
            _raise_last_error(target)

    def scandir(self, path):
        logger.debug("scandir(%s)", path)
        return os.scandir(path)

    def open_queue(self, name):
        """Opens an existing queue read-only and returns the posix_ipc.MessageQueue."""
        logger.debug("mq_open(%s, O_RDONLY)", name)
        return posix_ipc.MessageQueue(name, read=True, write=False)

    def unlink_queue(self, name):
        logger.debug("mq_unlink(%s)", name)
        posix_ipc.unlink_message_queue(name)
