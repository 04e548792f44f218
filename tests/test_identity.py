import pytest

from hfgw.fabric.block_decoder import decode_identity
from hfgw.fabric.errors import ConfigurationError
from hfgw.fabric.msp.identity import Identity, PrivateKeySigner, SigningIdentity, SimpleSignerAdapter

from conftest import MSP_ID


def test_identity_serializes_msp_identity(identity, certificate_pem):
    decoded = decode_identity(identity.serialize())
    assert decoded['mspid'] == MSP_ID
    assert decoded['id_bytes'] == certificate_pem


def test_identity_equality(certificate_pem):
    assert Identity(MSP_ID, certificate_pem) == Identity(MSP_ID, certificate_pem.decode())
    assert Identity(MSP_ID, certificate_pem) != Identity('Org2MSP', certificate_pem)


def test_identity_requires_fields(certificate_pem):
    with pytest.raises(ConfigurationError):
        Identity(None, certificate_pem)
    with pytest.raises(ConfigurationError):
        Identity(MSP_ID, None)


@pytest.mark.asyncio
async def test_signing_identity_with_key_signer(identity, key_signer):
    signing_identity = SigningIdentity(identity, key_signer)
    signature = await signing_identity.sign(b'message')

    assert signing_identity.identity() == identity.serialize()
    assert signing_identity.mspid == MSP_ID
    assert identity.verify(b'message', signature)


@pytest.mark.asyncio
async def test_signing_identity_from_pem(identity, private_key_pem):
    signing_identity = SigningIdentity(identity, PrivateKeySigner.from_pem(private_key_pem))
    assert identity.verify(b'data', await signing_identity.sign(b'data'))


@pytest.mark.asyncio
async def test_signing_identity_accepts_async_callable():
    async def sign(message):
        return b'async:' + message

    signing_identity = SigningIdentity(b'creator', sign)
    assert signing_identity.serialize() == b'creator'
    assert signing_identity.mspid is None
    assert await signing_identity.sign(b'm') == b'async:m'


@pytest.mark.asyncio
async def test_signing_identity_from_adapter():
    adapter = SimpleSignerAdapter(b'creator', lambda message: b'sig')
    signing_identity = await SigningIdentity.from_adapter(adapter)

    assert signing_identity.serialize() == b'creator'
    assert await signing_identity.sign(b'm') == b'sig'


def test_signing_identity_requires_identity_and_signer(mock_signer):
    with pytest.raises(ConfigurationError):
        SigningIdentity(None, mock_signer)
    with pytest.raises(ConfigurationError):
        SigningIdentity(b'creator', None)
    with pytest.raises(ConfigurationError):
        SigningIdentity(b'creator', 'not a signer')


@pytest.mark.asyncio
async def test_signing_identity_accepts_text_identity(mock_signer):
    signing_identity = SigningIdentity('serialized creator', mock_signer)

    assert signing_identity.identity() == b'serialized creator'
    assert signing_identity.serialize() == b'serialized creator'
    assert await signing_identity.sign(b'm') == mock_signer.sign(b'm')
