# -*- coding: utf-8 -*-
# Generated by the protocol buffer compiler.  DO NOT EDIT!
# source: hfgw/protos/gateway/gateway.proto
"""Generated protocol buffer code."""
from google.protobuf.internal import builder as _builder
from google.protobuf import descriptor as _descriptor
from google.protobuf import descriptor_pool as _descriptor_pool
from google.protobuf import symbol_database as _symbol_database
# @@protoc_insertion_point(imports)

_sym_db = _symbol_database.Default()


from hfgw.protos.common import common_pb2 as hfgw_dot_protos_dot_common_dot_common__pb2
from hfgw.protos.peer import proposal_pb2 as hfgw_dot_protos_dot_peer_dot_proposal__pb2
from hfgw.protos.peer import proposal_response_pb2 as hfgw_dot_protos_dot_peer_dot_proposal__response__pb2
from hfgw.protos.peer import transaction_pb2 as hfgw_dot_protos_dot_peer_dot_transaction__pb2


DESCRIPTOR = _descriptor_pool.Default().AddSerializedFile(b'\n!hfgw/protos/gateway/gateway.proto\x12\x07gateway\x1a\x1fhfgw/protos/common/common.proto\x1a\x1fhfgw/protos/peer/proposal.proto\x1a(hfgw/protos/peer/proposal_response.proto\x1a\"hfgw/protos/peer/transaction.proto\"\x93\x01\n\x0e\x45ndorseRequest\x12\x16\n\x0etransaction_id\x18\x01 \x01(\t\x12\x12\n\nchannel_id\x18\x02 \x01(\t\x12\x34\n\x14proposed_transaction\x18\x03 \x01(\x0b\x32\x16.protos.SignedProposal\x12\x1f\n\x17\x65ndorsing_organizations\x18\x04 \x03(\t\"A\n\x0f\x45ndorseResponse\x12.\n\x14prepared_transaction\x18\x01 \x01(\x0b\x32\x10.common.Envelope\"k\n\rSubmitRequest\x12\x16\n\x0etransaction_id\x18\x01 \x01(\t\x12\x12\n\nchannel_id\x18\x02 \x01(\t\x12.\n\x14prepared_transaction\x18\x03 \x01(\x0b\x32\x10.common.Envelope\"\x10\n\x0eSubmitResponse\"?\n\x19SignedCommitStatusRequest\x12\x0f\n\x07request\x18\x01 \x01(\x0c\x12\x11\n\tsignature\x18\x02 \x01(\x0c\"S\n\x13\x43ommitStatusRequest\x12\x16\n\x0etransaction_id\x18\x01 \x01(\t\x12\x12\n\nchannel_id\x18\x02 \x01(\t\x12\x10\n\x08identity\x18\x03 \x01(\x0c\"V\n\x14\x43ommitStatusResponse\x12(\n\x06result\x18\x01 \x01(\x0e\x32\x18.protos.TxValidationCode\x12\x14\n\x0c\x62lock_number\x18\x02 \x01(\x04\"\x91\x01\n\x0f\x45valuateRequest\x12\x16\n\x0etransaction_id\x18\x01 \x01(\t\x12\x12\n\nchannel_id\x18\x02 \x01(\t\x12\x34\n\x14proposed_transaction\x18\x03 \x01(\x0b\x32\x16.protos.SignedProposal\x12\x1c\n\x14target_organizations\x18\x04 \x03(\t\"4\n\x10\x45valuateResponse\x12 \n\x06result\x18\x01 \x01(\x0b\x32\x10.protos.Response\"?\n\x0b\x45rrorDetail\x12\x0f\n\x07\x61\x64\x64ress\x18\x01 \x01(\t\x12\x0e\n\x06msp_id\x18\x02 \x01(\t\x12\x0f\n\x07message\x18\x03 \x01(\t2\x96\x02\n\x07Gateway\x12<\n\x07\x45ndorse\x12\x17.gateway.EndorseRequest\x1a\x18.gateway.EndorseResponse\x12\x39\n\x06Submit\x12\x16.gateway.SubmitRequest\x1a\x17.gateway.SubmitResponse\x12Q\n\x0c\x43ommitStatus\x12\".gateway.SignedCommitStatusRequest\x1a\x1d.gateway.CommitStatusResponse\x12?\n\x08\x45valuate\x12\x18.gateway.EvaluateRequest\x1a\x19.gateway.EvaluateResponseBX\n%org.hyperledger.fabric.protos.gatewayZ/github.com/hyperledger/fabric-protos-go/gatewayb\x06proto3')

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, 'hfgw.protos.gateway.gateway_pb2', globals())
if _descriptor._USE_C_DESCRIPTORS == False:

  DESCRIPTOR._options = None
  DESCRIPTOR._serialized_options = b'\n%org.hyperledger.fabric.protos.gatewayZ/github.com/hyperledger/fabric-protos-go/gateway'
  _ENDORSEREQUEST._serialized_start=191
  _ENDORSEREQUEST._serialized_end=338
  _ENDORSERESPONSE._serialized_start=340
  _ENDORSERESPONSE._serialized_end=405
  _SUBMITREQUEST._serialized_start=407
  _SUBMITREQUEST._serialized_end=514
  _SUBMITRESPONSE._serialized_start=516
  _SUBMITRESPONSE._serialized_end=532
  _SIGNEDCOMMITSTATUSREQUEST._serialized_start=534
  _SIGNEDCOMMITSTATUSREQUEST._serialized_end=597
  _COMMITSTATUSREQUEST._serialized_start=599
  _COMMITSTATUSREQUEST._serialized_end=682
  _COMMITSTATUSRESPONSE._serialized_start=684
  _COMMITSTATUSRESPONSE._serialized_end=770
  _EVALUATEREQUEST._serialized_start=773
  _EVALUATEREQUEST._serialized_end=918
  _EVALUATERESPONSE._serialized_start=920
  _EVALUATERESPONSE._serialized_end=972
  _ERRORDETAIL._serialized_start=974
  _ERRORDETAIL._serialized_end=1037
  _GATEWAY._serialized_start=1040
  _GATEWAY._serialized_end=1318
# @@protoc_insertion_point(module_scope)
