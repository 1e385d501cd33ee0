# Shared by premise.py and cleanup.py
QUEUE_NAME = "/pqadmin_demo"
MAX_MESSAGES = 10
MAX_MESSAGE_SIZE = 1024
