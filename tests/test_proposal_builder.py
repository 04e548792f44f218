import hashlib

import pytest

from hfgw.fabric import block_decoder
from hfgw.fabric.errors import ConfigurationError
from hfgw.fabric.msp.identity import SigningIdentity
from hfgw.fabric.transaction.proposal_builder import build_signed_proposal, qualified_transaction_name
from hfgw.fabric.transaction.transaction_id import TransactionID
from hfgw.protos.common import common_pb2

CREATOR = b'TestCreator'


@pytest.fixture
def signing_identity(mock_signer):
    return SigningIdentity(CREATOR, mock_signer)


def _decode(signed_proposal):
    proposal = block_decoder.decode_proposal(signed_proposal.proposal_bytes)
    header = block_decoder.decode_header(proposal.header)
    channel_header = block_decoder.decode_channel_header(header.channel_header)
    signature_header = block_decoder.decode_signature_header(header.signature_header)
    payload = block_decoder.decode_chaincode_proposal_payload(proposal.payload)
    invocation = block_decoder.decode_invocation_spec(payload.input)
    return proposal, channel_header, signature_header, payload, invocation


@pytest.mark.asyncio
async def test_transfer_proposal(signing_identity, mock_signer):
    signed_proposal = await build_signed_proposal('mychannel', 'mycc', 'transfer', ['a', 'b'],
                                                  signing_identity=signing_identity)

    _, channel_header, signature_header, payload, invocation = _decode(signed_proposal)

    assert channel_header.type == common_pb2.ENDORSER_TRANSACTION
    assert channel_header.version == 1
    assert channel_header.epoch == 0
    assert channel_header.channel_id == 'mychannel'
    assert channel_header.timestamp.seconds > 0
    assert block_decoder.decode_header_extension(channel_header.extension).chaincode_id.name == 'mycc'

    assert signature_header.creator == CREATOR
    assert len(signature_header.nonce) == 24

    chaincode_spec = invocation.chaincode_spec
    assert chaincode_spec.chaincode_id.name == 'mycc'
    assert list(chaincode_spec.input.args) == [b'transfer', b'a', b'b']
    assert len(payload.TransientMap) == 0

    # the signature covers the exact transmitted proposal bytes
    assert mock_signer.messages == [signed_proposal.proposal_bytes]
    assert signed_proposal.signature == b'sig:' + hashlib.sha256(signed_proposal.proposal_bytes).digest()


@pytest.mark.asyncio
async def test_transaction_id_is_derived_from_nonce_and_creator(signing_identity):
    signed_proposal = await build_signed_proposal('mychannel', 'mycc', 'transfer', ['a', 'b'],
                                                  signing_identity=signing_identity)

    _, channel_header, signature_header, _, _ = _decode(signed_proposal)
    expected = hashlib.sha256(signature_header.nonce + signature_header.creator).hexdigest()
    assert channel_header.tx_id == expected


@pytest.mark.asyncio
async def test_two_builds_differ(signing_identity):
    first = await build_signed_proposal('mychannel', 'mycc', 'transfer', ['a', 'b'],
                                        signing_identity=signing_identity)
    second = await build_signed_proposal('mychannel', 'mycc', 'transfer', ['a', 'b'],
                                         signing_identity=signing_identity)

    _, first_header, first_signature_header, _, _ = _decode(first)
    _, second_header, second_signature_header, _, _ = _decode(second)
    assert first_signature_header.nonce != second_signature_header.nonce
    assert first_header.tx_id != second_header.tx_id


@pytest.mark.asyncio
async def test_supplied_transaction_id_is_used(signing_identity):
    tx_id = TransactionID(signing_identity)
    signed_proposal = await build_signed_proposal('mychannel', 'mycc', 'transfer',
                                                  signing_identity=signing_identity, tx_id=tx_id)

    _, channel_header, signature_header, _, _ = _decode(signed_proposal)
    assert channel_header.tx_id == tx_id.transaction_id
    assert signature_header.nonce == tx_id.nonce


@pytest.mark.asyncio
async def test_transaction_id_of_another_creator_is_rejected(signing_identity):
    with pytest.raises(ValueError):
        await build_signed_proposal('mychannel', 'mycc', 'transfer',
                                    signing_identity=signing_identity, tx_id=TransactionID(b'someone else'))


@pytest.mark.asyncio
async def test_transient_map_stays_in_payload(signing_identity):
    signed_proposal = await build_signed_proposal('mychannel', 'mycc', 'store', ['k'],
                                                  transient_map={'secret': b'value', 'other': 'text'},
                                                  signing_identity=signing_identity)

    proposal, channel_header, _, payload, _ = _decode(signed_proposal)
    assert dict(payload.TransientMap) == {'secret': b'value', 'other': b'text'}
    assert b'value' not in proposal.header
    assert b'value' not in channel_header.extension


@pytest.mark.asyncio
async def test_bytes_arguments_pass_through(signing_identity):
    signed_proposal = await build_signed_proposal('mychannel', 'mycc', 'put', [b'\x00\xff', 'é'],
                                                  signing_identity=signing_identity)

    *_, invocation = _decode(signed_proposal)
    assert list(invocation.chaincode_spec.input.args) == [b'put', b'\x00\xff', 'é'.encode('utf-8')]


@pytest.mark.asyncio
async def test_tls_cert_hash_is_set(signing_identity):
    signed_proposal = await build_signed_proposal('mychannel', 'mycc', 'transfer',
                                                  signing_identity=signing_identity, tls_cert_hash=b'h' * 32)

    _, channel_header, _, _, _ = _decode(signed_proposal)
    assert channel_header.tls_cert_hash == b'h' * 32


@pytest.mark.asyncio
@pytest.mark.parametrize('channel, chaincode, name', [
    ('', 'mycc', 'transfer'),
    ('mychannel', '', 'transfer'),
    ('mychannel', 'mycc', ''),
])
async def test_missing_names_fail_before_signing(signing_identity, mock_signer, channel, chaincode, name):
    with pytest.raises(ValueError):
        await build_signed_proposal(channel, chaincode, name, signing_identity=signing_identity)
    assert mock_signer.messages == []


@pytest.mark.asyncio
async def test_missing_signing_identity():
    with pytest.raises(ConfigurationError):
        await build_signed_proposal('mychannel', 'mycc', 'transfer')


def test_qualified_transaction_name():
    assert qualified_transaction_name('transfer') == 'transfer'
    assert qualified_transaction_name('transfer', 'Token') == 'Token:transfer'
