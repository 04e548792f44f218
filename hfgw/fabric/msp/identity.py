import logging

from hfgw.fabric.errors import ConfigurationError
from hfgw.protos.msp import identities_pb2
from hfgw.util.crypto.crypto import ecies
from hfgw.util.utils import maybe_await, proto_b

_logger = logging.getLogger(__name__)


class Identity(object):
    """An MSP identity: organization id plus the member's certificate."""

    def __init__(self, mspId, certificate):

        if not certificate:
            raise ConfigurationError('Missing required parameter "certificate".')

        if not mspId:
            raise ConfigurationError('Missing required parameter "mspId".')

        self._mspId = mspId
        self._certificate = proto_b(certificate)

    @property
    def mspid(self):
        return self._mspId

    @property
    def certificate(self):
        return self._certificate

    def public_key(self, crypto_suite=None):
        crypto_suite = crypto_suite or ecies()
        return crypto_suite.load_certificate(self._certificate).public_key()

    def verify(self, msg, signature, crypto_suite=None):
        crypto_suite = crypto_suite or ecies()
        return crypto_suite.verify(self.public_key(crypto_suite), msg, signature)

    def serialize(self):
        serialized_identity = identities_pb2.SerializedIdentity()
        serialized_identity.mspid = self.mspid
        serialized_identity.id_bytes = self._certificate
        return serialized_identity.SerializeToString()

    def __eq__(self, other):
        return isinstance(other, Identity) and self.serialize() == other.serialize()

    def __hash__(self):
        return hash(self.serialize())

    def __str__(self):
        return f'Identity: {self._mspId}'


class Signer(object):
    """Anything that can sign a message.

    Implementations must be safe to call from concurrent invocations.
    """

    def sign(self, message):
        raise NotImplementedError


class PrivateKeySigner(Signer):
    """Signer backed by an in-memory EC private key."""

    def __init__(self, cryptoSuite, key):
        if not cryptoSuite:
            raise ConfigurationError('Missing required parameter "cryptoSuite"')

        if not key:
            raise ConfigurationError('Missing required parameter "key" for private key')

        self._cryptoSuite = cryptoSuite
        self._key = key

    @staticmethod
    def from_pem(private_key, cryptoSuite=None):
        crypto_suite = cryptoSuite or ecies()
        return PrivateKeySigner(crypto_suite, crypto_suite.load_private_key(private_key))

    def sign(self, message):
        return self._cryptoSuite.sign(self._key, message)


class SignerAdapter(object):
    """Supplies both the identity and the signing for external key stores.

    Both methods may return awaitables, e.g. for an HSM or a remote KMS.
    """

    def identity(self):
        raise NotImplementedError

    def sign(self, message):
        raise NotImplementedError


class SimpleSignerAdapter(SignerAdapter):

    def __init__(self, identity, sign):
        if not identity:
            raise ConfigurationError('Missing required parameter "identity".')
        if not callable(sign):
            raise ConfigurationError('The "sign" parameter must be callable')

        self._identity = identity
        self._sign = sign

    def identity(self):
        return self._identity

    def sign(self, message):
        return self._sign(message)


class SigningIdentity(object):
    """Pairs a serialized identity with a signing capability.

    Args:
        identity: Identity instance or already serialized identity bytes
        signer: Signer, SignerAdapter or a plain callable taking the message
            bytes; sync or async
    """

    def __init__(self, identity, signer):
        if not identity:
            raise ConfigurationError('Missing required parameter "identity".')

        if not signer:
            raise ConfigurationError('Missing required parameter "signer".')

        if not hasattr(signer, 'sign') and not callable(signer):
            raise ConfigurationError('The "signer" parameter must be a Signer or a callable')

        self._identity = identity
        if isinstance(identity, Identity):
            self._serialized = identity.serialize()
        elif isinstance(identity, str):
            self._serialized = proto_b(identity)
        else:
            self._serialized = bytes(identity)
        self._signer = signer

    @staticmethod
    async def from_adapter(adapter):
        identity = await maybe_await(adapter.identity())
        return SigningIdentity(identity, adapter)

    @property
    def mspid(self):
        if isinstance(self._identity, Identity):
            return self._identity.mspid
        return None

    def identity(self):
        """Serialized msp identity bytes, used as the creator."""
        return self._serialized

    def serialize(self):
        return self._serialized

    async def sign(self, msg):
        if hasattr(self._signer, 'sign'):
            signature = self._signer.sign(msg)
        else:
            signature = self._signer(msg)

        return bytes(await maybe_await(signature))
