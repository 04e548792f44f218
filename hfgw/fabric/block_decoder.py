"""Decoders for the nested byte fields of Fabric messages.

Most Fabric messages carry their sub-messages as pre-serialized ``bytes``;
each helper here peels off one of those layers.
"""
import logging

from google.protobuf.message import DecodeError

from hfgw.protos.common import common_pb2
from hfgw.protos.msp import identities_pb2
from hfgw.protos.peer import chaincode_pb2, proposal_pb2, proposal_response_pb2, transaction_pb2

_logger = logging.getLogger(__name__)


def decode_header(header_bytes):
    return common_pb2.Header.FromString(header_bytes)


def decode_channel_header(channel_header_bytes):
    return common_pb2.ChannelHeader.FromString(channel_header_bytes)


def decode_signature_header(signature_header_bytes):
    return common_pb2.SignatureHeader.FromString(signature_header_bytes)


def decode_identity(id_bytes):
    """Decode a serialized msp identity.

    Returns: dict with mspid and id_bytes
    """
    serialized_identity = identities_pb2.SerializedIdentity.FromString(id_bytes)
    return {
        'mspid': serialized_identity.mspid,
        'id_bytes': serialized_identity.id_bytes,
    }


def decode_proposal(proposal_bytes):
    return proposal_pb2.Proposal.FromString(proposal_bytes)


def decode_chaincode_proposal_payload(payload_bytes):
    return proposal_pb2.ChaincodeProposalPayload.FromString(payload_bytes)


def decode_invocation_spec(input_bytes):
    return chaincode_pb2.ChaincodeInvocationSpec.FromString(input_bytes)


def decode_header_extension(extension_bytes):
    return proposal_pb2.ChaincodeHeaderExtension.FromString(extension_bytes)


def decode_payload(payload_bytes):
    return common_pb2.Payload.FromString(payload_bytes)


def decode_transaction(data_bytes):
    return transaction_pb2.Transaction.FromString(data_bytes)


def decode_chaincode_action_payload(payload_bytes):
    return transaction_pb2.ChaincodeActionPayload.FromString(payload_bytes)


def decode_proposal_response_payload(proposal_response_payload_bytes):
    return proposal_response_pb2.ProposalResponsePayload.FromString(proposal_response_payload_bytes)


def decode_chaincode_action(action_bytes):
    return proposal_pb2.ChaincodeAction.FromString(action_bytes)


class DecodedResult(object):
    """Outcome of reading the chaincode response out of an envelope.

    state is one of DECODED, EMPTY or MALFORMED; payload is always bytes,
    reason explains EMPTY and MALFORMED outcomes.
    """

    DECODED = 'decoded'
    EMPTY = 'empty'
    MALFORMED = 'malformed'

    def __init__(self, state, payload=b'', reason=None, response=None):
        self.state = state
        self.payload = payload
        self.reason = reason
        self.response = response

    @classmethod
    def decoded(cls, response):
        return cls(cls.DECODED, bytes(response.payload), response=response)

    @classmethod
    def empty(cls, reason):
        return cls(cls.EMPTY, reason=reason)

    @classmethod
    def malformed(cls, reason):
        return cls(cls.MALFORMED, reason=reason)

    @property
    def is_decoded(self):
        return self.state == self.DECODED

    @property
    def is_malformed(self):
        return self.state == self.MALFORMED

    def __repr__(self):
        return f'DecodedResult({self.state}, {len(self.payload)} bytes, reason={self.reason!r})'


def decode_result(envelope):
    """Walk an endorsed envelope down to the chaincode response.

    Envelope.payload -> Payload.data -> Transaction.actions[0].payload
    -> ChaincodeActionPayload.action.proposal_response_payload
    -> ProposalResponsePayload.extension -> ChaincodeAction.response

    Never raises.

    Returns: DecodedResult
    """
    method = 'decode_result'

    if envelope is None or not envelope.payload:
        return DecodedResult.empty('envelope has no payload')

    try:
        payload = decode_payload(envelope.payload)
        transaction = decode_transaction(payload.data)
        if len(transaction.actions) == 0:
            return DecodedResult.empty('transaction has no actions')

        action_payload = decode_chaincode_action_payload(transaction.actions[0].payload)
        if not action_payload.HasField('action'):
            return DecodedResult.empty('chaincode action payload has no endorsed action')

        response_payload = decode_proposal_response_payload(action_payload.action.proposal_response_payload)
        chaincode_action = decode_chaincode_action(response_payload.extension)
        if not chaincode_action.HasField('response'):
            return DecodedResult.empty('chaincode action has no response')
    except (DecodeError, ValueError) as e:
        _logger.debug(f'{method} - envelope is not decodable: {e}')
        return DecodedResult.malformed(str(e))

    return DecodedResult.decoded(chaincode_action.response)


def extract_result(envelope):
    """Chaincode result bytes of an endorsed envelope, b'' when not found."""
    return decode_result(envelope).payload
