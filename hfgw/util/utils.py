import inspect
import logging
import time

from cryptography import x509
from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives import serialization
from google.protobuf import timestamp_pb2

from hfgw.fabric.config.config import Config
from hfgw.protos.common import common_pb2
from hfgw.protos.peer import chaincode_pb2, proposal_pb2

_logger = logging.getLogger(__name__)


def get_config_setting(name, default_value=None):
    return Config().get(name, default_value)


def set_config_setting(name, value):
    Config().set(name, value)


def proto_str(x):
    if isinstance(x, bytes):
        return x.decode('utf-8')
    return str(x)


def proto_b(x):
    if isinstance(x, bytes):
        return x
    return bytes(x, 'utf-8')


async def maybe_await(value):
    if inspect.isawaitable(value):
        return await value
    return value


def current_timestamp():
    now = time.time_ns()
    return timestamp_pb2.Timestamp(seconds=now // 10 ** 9, nanos=now % 10 ** 9)


def build_channel_header(header_type, channel_id, tx_id, epoch=0,
                         chaincode_id=None, timestamp=None, tls_cert_hash=None):
    """Build the ChannelHeader of a proposal.

    Args:
        header_type (int): common_pb2.HeaderType value
        channel_id (str): channel name
        tx_id (str): transaction id
        epoch (int): epoch, always 0 for gateway transactions
        chaincode_id (str): when set, the header extension names this chaincode
        timestamp: google.protobuf.Timestamp, now when omitted
        tls_cert_hash (bytes): hash of the client TLS certificate for mutual TLS

    Returns: common_pb2.ChannelHeader
    """
    channel_header = common_pb2.ChannelHeader()
    channel_header.type = header_type
    channel_header.version = 1
    channel_header.channel_id = proto_str(channel_id)
    channel_header.tx_id = proto_str(tx_id)
    channel_header.epoch = epoch
    channel_header.timestamp.CopyFrom(timestamp or current_timestamp())

    if chaincode_id:
        header_extension = proposal_pb2.ChaincodeHeaderExtension()
        header_extension.chaincode_id.CopyFrom(chaincode_pb2.ChaincodeID(name=proto_str(chaincode_id)))
        channel_header.extension = header_extension.SerializeToString()

    if tls_cert_hash:
        channel_header.tls_cert_hash = tls_cert_hash

    return channel_header


def build_header(creator, channel_header, nonce):
    """Build a Header out of independently serialized sub-headers.

    Args:
        creator (bytes): serialized msp identity of the submitter
        channel_header: common_pb2.ChannelHeader
        nonce (bytes): the nonce the transaction id was derived from

    Returns: common_pb2.Header
    """
    signature_header = common_pb2.SignatureHeader()
    signature_header.creator = creator
    signature_header.nonce = nonce

    header = common_pb2.Header()
    header.signature_header = signature_header.SerializeToString()
    header.channel_header = channel_header.SerializeToString()

    return header


def build_proposal(invoke_spec, header, transient_map=None):
    """Wrap an invocation spec and a header into a Proposal.

    The transient map only travels in the proposal payload, it is never part
    of the channel header.
    """
    cc_payload = proposal_pb2.ChaincodeProposalPayload()
    cc_payload.input = invoke_spec.SerializeToString()
    if transient_map:
        for key, value in transient_map.items():
            cc_payload.TransientMap[proto_str(key)] = proto_b(value)

    proposal = proposal_pb2.Proposal()
    proposal.header = header.SerializeToString()
    proposal.payload = cc_payload.SerializeToString()

    return proposal


async def sign_proposal(signing_identity, proposal):
    """Serialize a proposal once and sign those exact bytes.

    Returns: proposal_pb2.SignedProposal
    """
    proposal_bytes = proposal.SerializeToString()
    signature = await signing_identity.sign(proposal_bytes)

    signed_proposal = proposal_pb2.SignedProposal()
    signed_proposal.proposal_bytes = proposal_bytes
    signed_proposal.signature = signature

    return signed_proposal


def pem_to_der(pem):
    if isinstance(pem, str):
        pem = pem.encode()
    certificate = x509.load_pem_x509_certificate(pem, default_backend())
    return certificate.public_bytes(serialization.Encoding.DER)
