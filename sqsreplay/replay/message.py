from typing import Dict, Optional

EMPTY_BODY = '<empty>'


class FetchedMessage:

    def __init__(self, message_id: Optional[str], receipt_handle: Optional[str], body: str):
        self.message_id = message_id
        self.receipt_handle = receipt_handle
        self.body = body

    @staticmethod
    def from_response(message: Dict) -> 'FetchedMessage':
        body = message.get('Body')
        return FetchedMessage(
            message_id=message.get('MessageId'),
            receipt_handle=message.get('ReceiptHandle'),
            body=body if body is not None else EMPTY_BODY
        )


class TransferRecord:

    def __init__(self, body: str, deduplication_id: str, group_id: str):
        self.body = body
        self.deduplication_id = deduplication_id
        self.group_id = group_id
