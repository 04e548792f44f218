"""Shared fixtures: software identities, a deterministic signer and a
gateway client fake that records every call instead of reaching a peer."""
import asyncio
import datetime
import hashlib

import grpc
import pytest
from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.x509.oid import NameOID

from hfgw.fabric.config.config import Config
from hfgw.fabric.errors import GatewayRPCError
from hfgw.fabric.msp.identity import Identity, PrivateKeySigner
from hfgw.protos.common import common_pb2
from hfgw.protos.gateway import gateway_pb2
from hfgw.protos.peer import proposal_pb2, proposal_response_pb2, transaction_pb2
from hfgw.util.crypto.crypto import ecies

MSP_ID = 'Org1MSP'


def make_certificate(private_key, common_name='User1@org1.example.com'):
    subject = x509.Name([
        x509.NameAttribute(NameOID.ORGANIZATION_NAME, 'org1.example.com'),
        x509.NameAttribute(NameOID.COMMON_NAME, common_name),
    ])
    now = datetime.datetime.now(datetime.timezone.utc)
    certificate = (x509.CertificateBuilder()
                   .subject_name(subject)
                   .issuer_name(subject)
                   .public_key(private_key.public_key())
                   .serial_number(x509.random_serial_number())
                   .not_valid_before(now - datetime.timedelta(days=1))
                   .not_valid_after(now + datetime.timedelta(days=1))
                   .sign(private_key, hashes.SHA256()))
    return certificate.public_bytes(serialization.Encoding.PEM)


def make_envelope(result=b'result', with_action=True):
    """An endorsed envelope carrying result as the chaincode response."""
    response = proposal_response_pb2.Response(status=200, message='OK', payload=result)
    chaincode_action = proposal_pb2.ChaincodeAction(response=response)
    response_payload = proposal_response_pb2.ProposalResponsePayload(
        proposal_hash=b'proposal-hash', extension=chaincode_action.SerializeToString())
    endorsed_action = transaction_pb2.ChaincodeEndorsedAction(
        proposal_response_payload=response_payload.SerializeToString())
    action_payload = transaction_pb2.ChaincodeActionPayload(action=endorsed_action)

    transaction = transaction_pb2.Transaction()
    if with_action:
        transaction.actions.add(payload=action_payload.SerializeToString())

    payload = common_pb2.Payload(data=transaction.SerializeToString())
    return common_pb2.Envelope(payload=payload.SerializeToString())


class MockSigner(object):
    """Deterministic signer: signature = b'sig:' + sha256(message)."""

    def __init__(self):
        self.messages = []

    def sign(self, message):
        self.messages.append(bytes(message))
        return b'sig:' + hashlib.sha256(message).digest()


class FakeGatewayClient(object):
    """Records (method, request) pairs and answers with canned responses."""

    def __init__(self, result=b'result', envelope=None, status=transaction_pb2.VALID, block_number=42):
        self.calls = []
        self.result = result
        self.envelope = envelope if envelope is not None else make_envelope(result)
        self.status = status
        self.block_number = block_number
        self.closed = False

    async def evaluate(self, request):
        self.calls.append(('evaluate', request))
        return gateway_pb2.EvaluateResponse(result=proposal_response_pb2.Response(status=200, payload=self.result))

    async def endorse(self, request):
        self.calls.append(('endorse', request))
        return gateway_pb2.EndorseResponse(prepared_transaction=self.envelope)

    async def submit(self, request):
        self.calls.append(('submit', request))
        return gateway_pb2.SubmitResponse()

    async def commit_status(self, request):
        self.calls.append(('commit_status', request))
        return gateway_pb2.CommitStatusResponse(result=self.status, block_number=self.block_number)

    async def close(self):
        self.closed = True

    def methods(self):
        return [name for name, _ in self.calls]


class YieldingGatewayClient(FakeGatewayClient):
    """Gives control back to the event loop before answering, so that
    concurrent callers interleave. Calls named in fail_once raise the first
    time."""

    def __init__(self, *args, fail_once=(), **kwargs):
        super(YieldingGatewayClient, self).__init__(*args, **kwargs)
        self.fail_once = set(fail_once)

    async def _answer(self, name, request):
        await asyncio.sleep(0)
        if name in self.fail_once:
            self.fail_once.discard(name)
            self.calls.append((name, request))
            raise GatewayRPCError(grpc.StatusCode.UNAVAILABLE, f'{name} failed')
        return await getattr(super(YieldingGatewayClient, self), name)(request)

    async def evaluate(self, request):
        return await self._answer('evaluate', request)

    async def endorse(self, request):
        return await self._answer('endorse', request)

    async def submit(self, request):
        return await self._answer('submit', request)


class AsyncMockSigner(MockSigner):
    """MockSigner whose signing suspends, like a remote key store."""

    async def sign(self, message):
        await asyncio.sleep(0)
        return super(AsyncMockSigner, self).sign(message)


@pytest.fixture(autouse=True)
def reset_config():
    Config.reset()
    yield
    Config.reset()


@pytest.fixture
def crypto_suite():
    return ecies()


@pytest.fixture
def private_key(crypto_suite):
    return crypto_suite.generate_private_key()


@pytest.fixture
def private_key_pem(private_key):
    return private_key.private_bytes(serialization.Encoding.PEM,
                                     serialization.PrivateFormat.PKCS8,
                                     serialization.NoEncryption())


@pytest.fixture
def certificate_pem(private_key):
    return make_certificate(private_key)


@pytest.fixture
def identity(certificate_pem):
    return Identity(MSP_ID, certificate_pem)


@pytest.fixture
def key_signer(crypto_suite, private_key):
    return PrivateKeySigner(crypto_suite, private_key)


@pytest.fixture
def mock_signer():
    return MockSigner()


@pytest.fixture
def fake_client():
    return FakeGatewayClient()
