from typing import List, Optional

from botocore.exceptions import BotoCoreError, ClientError

from sqsreplay.replay.message import FetchedMessage


class TransportError(Exception):
    """Network, auth or service failure from an SQS call"""

    def __init__(self, operation: str, cause: Exception):
        Exception.__init__(self, f'{operation} failed: {cause}')
        self.operation = operation
        self.cause = cause


class SQS:
    def __init__(self, sqs_client):
        self.sqs = sqs_client

    def list_queues(self, queue_name_prefix: Optional[str] = None) -> List[str]:
        kwargs = {'MaxResults': 1000}
        if queue_name_prefix:
            kwargs['QueueNamePrefix'] = queue_name_prefix
        urls = []
        try:
            result = self.sqs.list_queues(**kwargs)
            if 'QueueUrls' in result:
                urls.extend(result['QueueUrls'])
            while 'NextToken' in result and result['NextToken'] is not None:
                result = self.sqs.list_queues(**kwargs, NextToken=result['NextToken'])
                if 'QueueUrls' in result:
                    urls.extend(result['QueueUrls'])
        except (ClientError, BotoCoreError) as ex:
            raise TransportError('ListQueues', ex) from ex
        return urls

    def receive_batch(
            self, queue_url: str, max_count: int, wait_time: int, visibility_timeout: int
    ) -> List[FetchedMessage]:
        # ReceiveRequestAttemptId is not sent, a failed receive is not re-requested
        try:
            response = self.sqs.receive_message(
                QueueUrl=queue_url,
                MaxNumberOfMessages=max_count,
                WaitTimeSeconds=wait_time,
                VisibilityTimeout=visibility_timeout
            )
        except (ClientError, BotoCoreError) as ex:
            raise TransportError('ReceiveMessage', ex) from ex
        return [
            FetchedMessage.from_response(message)
            for message in response.get('Messages', [])
        ]

    def send_message(self, queue_url: str, body: str, deduplication_id: str, group_id: str) -> Optional[str]:
        try:
            response = self.sqs.send_message(
                QueueUrl=queue_url,
                MessageBody=body,
                MessageDeduplicationId=deduplication_id,
                MessageGroupId=group_id
            )
        except (ClientError, BotoCoreError) as ex:
            raise TransportError('SendMessage', ex) from ex
        return response.get('SequenceNumber')

    def delete_message(self, queue_url: str, receipt_handle: str):
        try:
            self.sqs.delete_message(QueueUrl=queue_url, ReceiptHandle=receipt_handle)
        except (ClientError, BotoCoreError) as ex:
            raise TransportError('DeleteMessage', ex) from ex
