STATUS_COMPLETE = 'COMPLETE'
STATUS_FAILED = 'FAILED'

EXIT_OK = 0
EXIT_MISSING_SUBCOMMAND = 1
EXIT_LIST_FAILED = 2
EXIT_REPLAY_FAILED = 3

MAX_BATCH_SIZE = 10
WAIT_TIME_SECONDS = 3
VISIBILITY_TIMEOUT = 5
