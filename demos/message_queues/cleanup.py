#!/usr/bin/env python3

import posix_ipc

from utils import QUEUE_NAME

try:
    posix_ipc.unlink_message_queue(QUEUE_NAME)
except posix_ipc.ExistentialError:
    print(f'''Message queue "{QUEUE_NAME}" doesn't exist.''')
else:
    print(f'Message queue "{QUEUE_NAME}" removed')

print("\nAll clean!")
