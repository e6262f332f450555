import os
from typing import Dict

import boto3

from tests.monkey.session import MonkeyPatchSession
from tests.monkey.sqs import MonkeyPatchSQSClient, MySQS


class MonkeyPatch:

    def __init__(self):
        self.mysqs = MySQS()
        self._clients = {
            'sqs': MonkeyPatchSQSClient(mysqs=self.mysqs),
        }
        self._sessions = []
        self._environ = dict()

    def sqs(self):
        return self._clients['sqs']

    def Session(self, *args, **kwargs):
        session = MonkeyPatchSession(self._clients, **kwargs)
        self._sessions.append(session)
        return session

    def last_session(self) -> MonkeyPatchSession:
        return self._sessions[-1]

    @property
    def environ(self):
        return self._environ

    def patch(self, *, environ: Dict):
        self._environ = environ
        self._sessions.clear()
        for client in self._clients.values():
            client.patch()
        self.mysqs.patch()
        os.environ = self.environ
        boto3.session = self
        boto3.Session = self.Session


patch = MonkeyPatch()
