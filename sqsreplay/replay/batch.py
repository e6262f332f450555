import traceback
from typing import List

from sqsreplay.facade.sqs import SQS, TransportError
from sqsreplay.replay import (
    STATUS_COMPLETE, STATUS_FAILED, EXIT_OK, EXIT_REPLAY_FAILED,
    MAX_BATCH_SIZE, WAIT_TIME_SECONDS, VISIBILITY_TIMEOUT
)
from sqsreplay.replay.message import FetchedMessage
from sqsreplay.replay.transfer import MessageTransfer


class ReplayResult:

    def __init__(self):
        self.status = STATUS_COMPLETE
        self.reason = 'Source queue drained'
        self.exit_code = EXIT_OK
        self.batches = 0
        self.received = 0
        self.sent = 0
        self.deleted = 0
        self.skipped = 0
        self.delete_failures = 0

    def fail(self, reason: str):
        self.status = STATUS_FAILED
        self.reason = reason
        self.exit_code = EXIT_REPLAY_FAILED
        return self


class BatchReplay:
    """
    Moves every message from a source queue to a destination FIFO queue.

    Messages are received in batches, sent one at a time with a fresh deduplication id and the
    group id given for the run, and deleted from the source once the send succeeds. The run stops
    after the first batch that comes back smaller than the requested maximum.

    A failed receive or send ends the run with a FAILED result. A failed delete is only logged,
    which leaves the original on the source queue with a copy already delivered.
    """

    def __init__(
            self, sqs: SQS, transfer: MessageTransfer = None, print=print,
            max_batch_size=MAX_BATCH_SIZE, wait_time=WAIT_TIME_SECONDS, visibility_timeout=VISIBILITY_TIMEOUT
    ):
        self.sqs = sqs
        self.transfer = transfer if transfer is not None else MessageTransfer(sqs=sqs)
        self.print = print
        self.max_batch_size = max_batch_size
        self.wait_time = wait_time
        self.visibility_timeout = visibility_timeout

    def replay(self, source: str, destination: str, group_id: str) -> ReplayResult:
        self.print('     Source queue URL', source)
        self.print('Destination queue URL', destination)
        self.print('')
        result = ReplayResult()
        try:
            self._replay_batches(source, destination, group_id, result)
        finally:
            self.print(
                f'{result.received} received , {result.sent} sent , '
                f'{result.deleted} deleted , {result.skipped} skipped'
            )
            self.print(f'Replay {result.status}: {result.reason}')
        return result

    def _replay_batches(self, source: str, destination: str, group_id: str, result: ReplayResult):
        more_messages = True
        batch_number = 1
        while more_messages:
            self.print(f'Requesting {self.max_batch_size} messages in batch {batch_number}')
            try:
                messages: List[FetchedMessage] = self.sqs.receive_batch(
                    queue_url=source,
                    max_count=self.max_batch_size,
                    wait_time=self.wait_time,
                    visibility_timeout=self.visibility_timeout
                )
            except TransportError as ex:
                self.print(f'Failed to receive messages from source queue: {ex}')
                traceback.print_exception(ex)
                result.fail(f'Failed to receive batch {batch_number}: {ex}')
                return
            result.batches += 1
            result.received += len(messages)
            if len(messages) == 0:
                self.print(f'No messages received in batch {batch_number}')
            else:
                self.print(f'{len(messages)} messages received\n')
            if len(messages) < self.max_batch_size:
                more_messages = False
            for message in messages:
                if not self._replay_message(message, source, destination, group_id, result):
                    return
            batch_number += 1

    def _replay_message(
            self, message: FetchedMessage, source: str, destination: str, group_id: str, result: ReplayResult
    ) -> bool:
        message_id = message.message_id or '<unknown>'
        if message.receipt_handle is None:
            self.print(f"Didn't receive receipt handle for Message ID: {message_id} Continuing to next message...")
            result.skipped += 1
            return True
        self.print('Message ID', message_id)
        self.print(message.body)
        try:
            sequence_number = self.transfer.transfer(destination=destination, body=message.body, group_id=group_id)
        except TransportError as ex:
            self.print(f'Failed to send message ID {message_id} to destination queue: {ex}')
            traceback.print_exception(ex)
            result.fail(f'Failed to send message ID {message_id}: {ex}')
            return False
        result.sent += 1
        self.print(f'Sent successfully with sequence number {sequence_number or "<unknown>"}')
        try:
            self.sqs.delete_message(queue_url=source, receipt_handle=message.receipt_handle)
        except TransportError as ex:
            self.print(f'Failed to delete message from source queue: {ex}')
            result.delete_failures += 1
            return True
        result.deleted += 1
        self.print('Message deleted from source queue\n')
        return True
