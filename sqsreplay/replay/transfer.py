import uuid
from typing import Callable, Optional

from sqsreplay.facade.sqs import SQS
from sqsreplay.replay.message import TransferRecord


class MessageTransfer:
    """
    Sends one copy of a fetched message body to the destination queue.

    Every call gets a fresh deduplication id, so a body sent twice is delivered twice.
    The group id is passed through unchanged.
    """

    def __init__(self, sqs: SQS, new_id: Callable[[], str] = lambda: str(uuid.uuid4())):
        self.sqs = sqs
        self.new_id = new_id

    def transfer(self, destination: str, body: str, group_id: str) -> Optional[str]:
        record = TransferRecord(body=body, deduplication_id=self.new_id(), group_id=group_id)
        return self.sqs.send_message(
            queue_url=destination,
            body=record.body,
            deduplication_id=record.deduplication_id,
            group_id=record.group_id
        )
