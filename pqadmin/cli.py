# Python imports
import enum
import logging
import os
import sys

# Project imports
from pqadmin.admin import QueueAdmin

logger = logging.getLogger(__name__)

# Set PQ_DEBUG to anything non-empty to see each OS call on stderr.
DEBUG_ENV_VAR = "PQ_DEBUG"

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

DEFAULT_PROGNAME = "pq"


class CommandLineError(Exception):
    '''Base class for errors in the arguments passed to pq.'''
    pass


class UsageError(CommandLineError):
    '''The subcommand or its queue name is missing.'''
    pass


class UnknownCommandError(CommandLineError):
    '''The subcommand isn't one pq knows about.'''
    def __init__(self, action):
        super().__init__(action)
        self.action = action


class Command(enum.Enum):
    LS = "ls"
    STAT = "stat"
    UNLINK = "unlink"
    UMOUNT = "umount"

    @property
    def takes_queue_name(self):
        return self in (Command.STAT, Command.UNLINK)


def usage(progname):
    return (f"Usage: $ sudo {progname} "
            "{ ls | stat /<queue-name> | unlink /<queue-name> | umount }")


def parse_args(argv):
    """Turns argv (without the program name) into a (Command, queue_name) tuple.

    queue_name is None for commands that don't take one. Arguments beyond those a command
    needs are ignored.
    """
    if not argv:
        raise UsageError()

    try:
        command = Command(argv[0])
    except ValueError:
        raise UnknownCommandError(argv[0]) from None

    queue_name = None
    if command.takes_queue_name:
        if len(argv) < 2:
            raise UsageError()
        queue_name = argv[1]

    return command, queue_name


def _configure_logging():
    if os.environ.get(DEBUG_ENV_VAR):
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr,
                            format="%(name)s: %(levelname)s: %(message)s")


def run(admin, command, queue_name=None):
    """Mounts the queue filesystem if necessary and then performs command. Returns True on
    success, False otherwise.
    """
    if not admin.ensure_mounted():
        return False

    logger.debug("running %s", command.value)

    if command is Command.LS:
        return admin.list_queues()
    elif command is Command.STAT:
        return admin.stat_queue(queue_name)
    elif command is Command.UNLINK:
        return admin.unlink_queue(queue_name)
    elif command is Command.UMOUNT:
        return admin.unmount()
    else:
        raise ValueError(f"Unhandled command {command!r}")


def main(argv=None, admin=None):
    """Entry point for the pq command. Returns the process exit status."""
    if argv is None:
        argv = sys.argv

    progname = os.path.basename(argv[0]) if argv and argv[0] else DEFAULT_PROGNAME
    if progname == "__main__.py":
        progname = "python -m pqadmin"

    _configure_logging()

    try:
        command, queue_name = parse_args(argv[1:])
    except UsageError:
        print("Error: Invalid usage", file=sys.stderr)
        print(usage(progname), file=sys.stderr)
        return EXIT_FAILURE
    except UnknownCommandError as exc:
        print(f'Error: Invalid action "{exc.action}"', file=sys.stderr)
        print(usage(progname), file=sys.stderr)
        return EXIT_FAILURE

    if admin is None:
        admin = QueueAdmin()

    return EXIT_SUCCESS if run(admin, command, queue_name) else EXIT_FAILURE


def console_main():
    sys.exit(main())
