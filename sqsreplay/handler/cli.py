import os
import sys
from argparse import ArgumentParser
from typing import List, Optional

import boto3
import botocore.config

from sqsreplay.facade.sqs import SQS
from sqsreplay.replay import EXIT_MISSING_SUBCOMMAND, WAIT_TIME_SECONDS
from sqsreplay.replay.batch import BatchReplay
from sqsreplay.replay.enumerator import QueueEnumerator

DEFAULT_REGION = 'eu-west-1'


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog='sqs-replay', description='Read messages from one queue and send them to another')
    parser.add_argument('-p', '--profile', default=os.environ.get('AWS_PROFILE'))
    parser.add_argument('-r', '--region', default=os.environ.get('AWS_REGION', DEFAULT_REGION))
    parser.add_argument('--endpoint-url', default=os.environ.get('SQS_ENDPOINT_URL'))
    subparsers = parser.add_subparsers(dest='command')

    send = subparsers.add_parser('send', help='Send messages')
    send.add_argument(
        '-s', '--source-queue-url', required=True, help='The source SQS queue URL'
    )
    send.add_argument(
        '-d', '--destination-queue-url', required=True, help='The destination SQS queue URL'
    )
    send.add_argument(
        '-g', '--message-group-id', required=True,
        help='Message Group ID to use when sending to the destination queue'
    )

    list_queues = subparsers.add_parser('list-queues', help='List SQS Queue URLs')
    list_queues.add_argument('--queue-name-prefix', default=None)
    return parser


def sqs_client(args):
    # read timeout must outlast the long poll on receive, transport errors are not retried
    sqs_config = botocore.config.Config(
        connect_timeout=10, read_timeout=WAIT_TIME_SECONDS + 30, retries={'total_max_attempts': 1}
    )
    session = boto3.session.Session(region_name=args.region, profile_name=args.profile)
    return session.client('sqs', config=sqs_config, endpoint_url=args.endpoint_url)


def main(argv: Optional[List[str]] = None, print=print) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        print(parser.format_usage().rstrip())
        print('Missing required subcommand')
        return EXIT_MISSING_SUBCOMMAND
    sqs = SQS(sqs_client=sqs_client(args))
    if args.command == 'send':
        replay = BatchReplay(sqs=sqs, print=print)
        result = replay.replay(
            source=args.source_queue_url,
            destination=args.destination_queue_url,
            group_id=args.message_group_id
        )
    else:
        enumerator = QueueEnumerator(sqs=sqs, print=print)
        result = enumerator.list_queues(queue_name_prefix=args.queue_name_prefix)
    return result.exit_code


def run():
    sys.exit(main())
