from hfgw.fabric.block_decoder import DecodedResult, decode_result, extract_result
from hfgw.protos.common import common_pb2
from hfgw.protos.peer import transaction_pb2

from conftest import make_envelope


def test_extract_result_from_endorsed_envelope():
    envelope = make_envelope(b'{"owner":"b"}')

    assert extract_result(envelope) == b'{"owner":"b"}'
    decoded = decode_result(envelope)
    assert decoded.state == DecodedResult.DECODED
    assert decoded.response.status == 200


def test_envelope_without_actions_is_empty():
    envelope = make_envelope(b'ignored', with_action=False)

    assert extract_result(envelope) == b''
    assert decode_result(envelope).state == DecodedResult.EMPTY


def test_action_without_endorsed_action_is_empty():
    transaction = transaction_pb2.Transaction()
    transaction.actions.add(payload=transaction_pb2.ChaincodeActionPayload().SerializeToString())
    payload = common_pb2.Payload(data=transaction.SerializeToString())
    envelope = common_pb2.Envelope(payload=payload.SerializeToString())

    decoded = decode_result(envelope)
    assert decoded.state == DecodedResult.EMPTY
    assert decoded.payload == b''


def test_empty_envelope():
    assert decode_result(common_pb2.Envelope()).state == DecodedResult.EMPTY
    assert extract_result(None) == b''


def test_garbage_payload_is_malformed():
    envelope = common_pb2.Envelope(payload=b'\xff\xff\xff\xff')

    decoded = decode_result(envelope)
    assert decoded.is_malformed
    assert decoded.reason
    assert extract_result(envelope) == b''
