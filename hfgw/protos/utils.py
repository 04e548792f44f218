from hfgw.protos.common import common_pb2
from hfgw.protos.peer import chaincode_pb2


def create_cc_spec(chaincode_input, chaincode_id, type=None):
    """Create a ChaincodeSpec.

    :param chaincode_input: ChaincodeInput message
    :param chaincode_id: ChaincodeID message
    :param type: optional ChaincodeSpec.Type value, left UNDEFINED by default
    :return: ChaincodeSpec
    """
    chaincode_spec = chaincode_pb2.ChaincodeSpec()
    chaincode_spec.chaincode_id.CopyFrom(chaincode_id)
    chaincode_spec.input.CopyFrom(chaincode_input)
    if type is not None:
        chaincode_spec.type = type
    return chaincode_spec


def create_invocation_spec(chaincode_name, args):
    chaincode_id = chaincode_pb2.ChaincodeID(name=chaincode_name)
    chaincode_input = chaincode_pb2.ChaincodeInput()
    chaincode_input.args.extend(args)

    invocation_spec = chaincode_pb2.ChaincodeInvocationSpec()
    invocation_spec.chaincode_spec.CopyFrom(create_cc_spec(chaincode_input, chaincode_id))
    return invocation_spec


def create_envelope(signature, payload_bytes):
    envelope = common_pb2.Envelope()
    envelope.signature = signature
    envelope.payload = payload_bytes
    return envelope
