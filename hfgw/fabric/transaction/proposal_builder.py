import logging

from hfgw.fabric.errors import ConfigurationError
from hfgw.fabric.transaction.transaction_id import TransactionID
from hfgw.protos.common import common_pb2
from hfgw.protos.utils import create_invocation_spec
from hfgw.util.utils import build_channel_header, build_header, build_proposal, proto_b, sign_proposal

_logger = logging.getLogger(__name__)


def qualified_transaction_name(transaction_name, contract_name=None):
    if contract_name:
        return f'{contract_name}:{transaction_name}'
    return transaction_name


def build_invocation_args(transaction_name, args=None):
    """[transaction name, *args] as bytes, str values UTF-8 encoded."""
    return [proto_b(transaction_name)] + [proto_b(arg) for arg in (args or [])]


async def build_signed_proposal(channel, chaincode_name, transaction_name, args=None,
                                transient_map=None, signing_identity=None, tx_id=None,
                                tls_cert_hash=None):
    """Build and sign a chaincode invocation proposal.

    Args:
        channel (str): channel name
        chaincode_name (str): chaincode to invoke
        transaction_name (str): function name, sent as the first argument
        args (list): function arguments, str or bytes
        transient_map (dict): private data for the endorsers, never part of
            the transaction id nor of the channel header
        signing_identity (SigningIdentity): creator and signer of the proposal
        tx_id (TransactionID): transaction id to use, derived from the
            signing identity when omitted
        tls_cert_hash (bytes): client TLS certificate hash for mutual TLS

    Returns: proposal_pb2.SignedProposal
    """
    method = 'build_signed_proposal'

    if not channel:
        raise ValueError('Missing required parameter "channel"')
    if not chaincode_name:
        raise ValueError('Missing required parameter "chaincode_name"')
    if not transaction_name:
        raise ValueError('Missing required parameter "transaction_name"')
    if signing_identity is None:
        raise ConfigurationError('Missing required parameter "signing_identity"')

    invoke_spec = create_invocation_spec(chaincode_name, build_invocation_args(transaction_name, args))

    creator = signing_identity.serialize()
    if tx_id is None:
        tx_id = TransactionID(creator)
    elif tx_id.creator != creator:
        raise ValueError('Transaction id was not derived from the signing identity')

    _logger.debug(f'{method} - channel: {channel} chaincode: {chaincode_name} tx_id: {tx_id.transaction_id}')

    channel_header = build_channel_header(
        common_pb2.ENDORSER_TRANSACTION,
        channel,
        tx_id.transaction_id,
        0,
        chaincode_name,
        tls_cert_hash=tls_cert_hash)

    header = build_header(creator, channel_header, tx_id.nonce)
    proposal = build_proposal(invoke_spec, header, transient_map)
    signed_proposal = await sign_proposal(signing_identity, proposal)

    _logger.debug(f'{method} - signed proposal of {len(signed_proposal.proposal_bytes)} bytes')
    return signed_proposal
