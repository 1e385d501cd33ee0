#!/usr/bin/env python3

# Creates a queue with known attributes and puts a message in it, so that there's something
# for pq to look at:
#   $ ./premise.py
#   $ sudo pq ls
#   $ sudo pq stat /pqadmin_demo
#   $ ./cleanup.py

# 3rd party modules
import posix_ipc

# Utils for this demo
from utils import QUEUE_NAME, MAX_MESSAGES, MAX_MESSAGE_SIZE

mq = posix_ipc.MessageQueue(QUEUE_NAME, posix_ipc.O_CREX, max_messages=MAX_MESSAGES,
                            max_message_size=MAX_MESSAGE_SIZE)
mq.send(b"Oooo 'ello, I'm Mrs. Premise!")
# Closing the handle doesn't destroy the queue; it lives until someone unlinks it.
mq.close()

print(f"Created {QUEUE_NAME} (maxmsg {MAX_MESSAGES}, msgsize {MAX_MESSAGE_SIZE}, curmsgs 1)")
print(f"Try `sudo pq stat {QUEUE_NAME}`, then run cleanup.py or `sudo pq unlink {QUEUE_NAME}`.")
