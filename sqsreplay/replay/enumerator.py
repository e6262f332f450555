import traceback
from typing import List, Optional

from sqsreplay.facade.sqs import SQS, TransportError
from sqsreplay.replay import STATUS_COMPLETE, STATUS_FAILED, EXIT_OK, EXIT_LIST_FAILED


class EnumerationResult:

    def __init__(self, status: str, urls: List[str], reason: str, exit_code: int):
        self.status = status
        self.urls = urls
        self.reason = reason
        self.exit_code = exit_code


class QueueEnumerator:
    def __init__(self, sqs: SQS, print=print):
        self.sqs = sqs
        self.print = print

    def list_queues(self, queue_name_prefix: Optional[str] = None) -> EnumerationResult:
        try:
            urls = self.sqs.list_queues(queue_name_prefix=queue_name_prefix)
        except TransportError as ex:
            self.print(f'Failed to list queues: {ex}')
            traceback.print_exception(ex)
            return EnumerationResult(STATUS_FAILED, [], str(ex), EXIT_LIST_FAILED)
        if len(urls) == 0:
            self.print('No queues')
        for url in urls:
            self.print(url)
        return EnumerationResult(STATUS_COMPLETE, urls, f'Found {len(urls)} queues', EXIT_OK)
