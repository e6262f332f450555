from sqsreplay.facade.sqs import SQS
from sqsreplay.replay.enumerator import QueueEnumerator
from tests.stubs.print_stub import PrintStub
from tests.stubs.sqs_client_stub import SQSClientStub


class TestCase:

    def test_list_queues_prints_each_url(self):
        sqs_client = SQSClientStub()
        sqs_client.list_responses = [{'QueueUrls': ['http://localhost/sqs/a', 'http://localhost/sqs/b']}]
        printer = PrintStub()
        result = QueueEnumerator(sqs=SQS(sqs_client=sqs_client), print=printer.print).list_queues()
        assert result.status == 'COMPLETE'
        assert result.exit_code == 0
        assert result.urls == ['http://localhost/sqs/a', 'http://localhost/sqs/b']
        assert printer.lines == [('http://localhost/sqs/a',), ('http://localhost/sqs/b',)]

    def test_list_queues_empty(self):
        sqs_client = SQSClientStub()
        sqs_client.list_responses = [{}]
        printer = PrintStub()
        result = QueueEnumerator(sqs=SQS(sqs_client=sqs_client), print=printer.print).list_queues()
        assert result.urls == []
        assert result.reason == 'Found 0 queues'
        assert result.exit_code == 0
        printer.assert_has_line('No queues')

    def test_list_queues_failure(self):
        sqs_client = SQSClientStub()
        sqs_client.fail_list = True
        printer = PrintStub()
        result = QueueEnumerator(sqs=SQS(sqs_client=sqs_client), print=printer.print).list_queues()
        assert result.status == 'FAILED'
        assert result.exit_code == 2
        assert result.reason.startswith('ListQueues failed')
        printer.assert_printed('Failed to list queues')
        printer.assert_not_printed('No queues')
