# -*- coding: utf-8 -*-
# Generated by the protocol buffer compiler.  DO NOT EDIT!
# source: meterus/protocol/meters/v1/meters.proto
"""Generated protocol buffer code."""
from google.protobuf.internal import builder as _builder
from google.protobuf import descriptor as _descriptor
from google.protobuf import descriptor_pool as _descriptor_pool
from google.protobuf import symbol_database as _symbol_database
# @@protoc_insertion_point(imports)

_sym_db = _symbol_database.Default()


from google.protobuf import empty_pb2 as google_dot_protobuf_dot_empty__pb2
from google.protobuf import struct_pb2 as google_dot_protobuf_dot_struct__pb2
from google.protobuf import timestamp_pb2 as google_dot_protobuf_dot_timestamp__pb2


DESCRIPTOR = _descriptor_pool.Default().AddSerializedFile(b'\n\'meterus/protocol/meters/v1/meters.proto\x12\tmeters.v1\x1a\x1bgoogle/protobuf/empty.proto\x1a\x1cgoogle/protobuf/struct.proto\x1a\x1fgoogle/protobuf/timestamp.proto\"\xae\x01\n\nCloudEvent\x12\n\n\x02id\x18\x01 \x01(\t\x12\x0e\n\x06source\x18\x02 \x01(\t\x12\x14\n\x0cspec_version\x18\x03 \x01(\t\x12\x0c\n\x04type\x18\x04 \x01(\t\x12(\n\x04time\x18\x05 \x01(\x0b\x32\x1a.google.protobuf.Timestamp\x12\x0f\n\x07subject\x18\x06 \x01(\t\x12%\n\x04\x64\x61ta\x18\x07 \x01(\x0b\x32\x17.google.protobuf.Struct\"\xb2\x01\n\x05Meter\x12\n\n\x02id\x18\x01 \x01(\t\x12\x0c\n\x04slug\x18\x02 \x01(\t\x12\x18\n\x0b\x64\x65scription\x18\x03 \x01(\tH\x00\x88\x01\x01\x12+\n\x0b\x61ggregation\x18\x04 \x01(\x0e\x32\x16.meters.v1.Aggregation\x12\x10\n\x08group_by\x18\x05 \x03(\t\x12\x12\n\ncreated_by\x18\x06 \x01(\t\x12\x12\n\nevent_type\x18\x07 \x01(\tB\x0e\n\x0c_description\"#\n\x07MeterId\x12\x18\n\x10meter_id_or_slug\x18\x01 \x01(\t\"0\n\x11ListMetersRequest\x12\r\n\x05limit\x18\x01 \x01(\x05\x12\x0c\n\x04page\x18\x02 \x01(\x05\"6\n\x12ListMetersResponse\x12 \n\x06meters\x18\x01 \x03(\x0b\x32\x10.meters.v1.Meter\"\xb3\x01\n\x12\x43reateMeterRequest\x12\x0c\n\x04slug\x18\x01 \x01(\t\x12\x18\n\x0b\x64\x65scription\x18\x02 \x01(\tH\x00\x88\x01\x01\x12+\n\x0b\x61ggregation\x18\x03 \x01(\x0e\x32\x16.meters.v1.Aggregation\x12\x10\n\x08group_by\x18\x04 \x03(\t\x12\x12\n\ncreated_by\x18\x05 \x01(\t\x12\x12\n\nevent_type\x18\x06 \x01(\tB\x0e\n\x0c_description\"\xa2\x01\n\x11QueryMeterRequest\x12\x18\n\x10meter_id_or_slug\x18\x01 \x01(\t\x12(\n\x04\x66rom\x18\x02 \x01(\x0b\x32\x1a.google.protobuf.Timestamp\x12&\n\x02to\x18\x03 \x01(\x0b\x32\x1a.google.protobuf.Timestamp\x12\x0f\n\x07subject\x18\x04 \x03(\t\x12\x10\n\x08group_by\x18\x05 \x03(\t\"\xf4\x01\n\nMeterValue\x12\x0f\n\x07subject\x18\x01 \x01(\t\x12\x30\n\x0cwindow_start\x18\x02 \x01(\x0b\x32\x1a.google.protobuf.Timestamp\x12.\n\nwindow_end\x18\x03 \x01(\x0b\x32\x1a.google.protobuf.Timestamp\x12\r\n\x05value\x18\x04 \x01(\x01\x12\x34\n\x08group_by\x18\x05 \x03(\x0b\x32\".meters.v1.MeterValue.GroupByEntry\x1a.\n\x0cGroupByEntry\x12\x0b\n\x03key\x18\x01 \x01(\t\x12\r\n\x05value\x18\x02 \x01(\t:\x02\x38\x01\"9\n\x12QueryMeterResponse\x12#\n\x04\x64\x61ta\x18\x01 \x03(\x0b\x32\x15.meters.v1.MeterValue\"4\n\x18ListMeterSubjectsRequest\x12\x18\n\x10meter_id_or_slug\x18\x01 \x01(\t\"-\n\x19ListMeterSubjectsResponse\x12\x10\n\x08subjects\x18\x01 \x03(\t*\x95\x01\n\x0b\x41ggregation\x12\x1b\n\x17\x41GGREGATION_UNSPECIFIED\x10\x00\x12\x13\n\x0f\x41GGREGATION_SUM\x10\x01\x12\x15\n\x11\x41GGREGATION_COUNT\x10\x02\x12\x13\n\x0f\x41GGREGATION_AVG\x10\x03\x12\x13\n\x0f\x41GGREGATION_MIN\x10\x04\x12\x13\n\x0f\x41GGREGATION_MAX\x10\x05\x32\xed\x03\n\x0fMeteringService\x12\x37\n\x06Ingest\x12\x15.meters.v1.CloudEvent\x1a\x16.google.protobuf.Empty\x12I\n\nListMeters\x12\x1c.meters.v1.ListMetersRequest\x1a\x1d.meters.v1.ListMetersResponse\x12\x30\n\x08GetMeter\x12\x12.meters.v1.MeterId\x1a\x10.meters.v1.Meter\x12>\n\x0b\x43reateMeter\x12\x1d.meters.v1.CreateMeterRequest\x1a\x10.meters.v1.Meter\x12\x39\n\x0b\x44\x65leteMeter\x12\x12.meters.v1.MeterId\x1a\x16.google.protobuf.Empty\x12I\n\nQueryMeter\x12\x1c.meters.v1.QueryMeterRequest\x1a\x1d.meters.v1.QueryMeterResponse\x12^\n\x11ListMeterSubjects\x12#.meters.v1.ListMeterSubjectsRequest\x1a$.meters.v1.ListMeterSubjectsResponseB+Z)github.com/elliot14A/meterus-go/meters/v1b\x06proto3')

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, 'meterus.protocol.meters.v1.meters_pb2', globals())
if _descriptor._USE_C_DESCRIPTORS == False:

  DESCRIPTOR._options = None
  DESCRIPTOR._serialized_options = b'Z)github.com/elliot14A/meterus-go/meters/v1'
  _METERVALUE_GROUPBYENTRY._options = None
  _METERVALUE_GROUPBYENTRY._serialized_options = b'8\001'
  _AGGREGATION._serialized_start=1402
  _AGGREGATION._serialized_end=1551
  _CLOUDEVENT._serialized_start=147
  _CLOUDEVENT._serialized_end=321
  _METER._serialized_start=324
  _METER._serialized_end=502
  _METERID._serialized_start=504
  _METERID._serialized_end=539
  _LISTMETERSREQUEST._serialized_start=541
  _LISTMETERSREQUEST._serialized_end=589
  _LISTMETERSRESPONSE._serialized_start=591
  _LISTMETERSRESPONSE._serialized_end=645
  _CREATEMETERREQUEST._serialized_start=648
  _CREATEMETERREQUEST._serialized_end=827
  _QUERYMETERREQUEST._serialized_start=830
  _QUERYMETERREQUEST._serialized_end=992
  _METERVALUE._serialized_start=995
  _METERVALUE._serialized_end=1239
  _METERVALUE_GROUPBYENTRY._serialized_start=1193
  _METERVALUE_GROUPBYENTRY._serialized_end=1239
  _QUERYMETERRESPONSE._serialized_start=1241
  _QUERYMETERRESPONSE._serialized_end=1298
  _LISTMETERSUBJECTSREQUEST._serialized_start=1300
  _LISTMETERSUBJECTSREQUEST._serialized_end=1352
  _LISTMETERSUBJECTSRESPONSE._serialized_start=1354
  _LISTMETERSUBJECTSRESPONSE._serialized_end=1399
  _METERINGSERVICE._serialized_start=1554
  _METERINGSERVICE._serialized_end=2047
# @@protoc_insertion_point(module_scope)
