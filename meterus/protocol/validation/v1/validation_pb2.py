# -*- coding: utf-8 -*-
# Generated by the protocol buffer compiler.  DO NOT EDIT!
# source: meterus/protocol/validation/v1/validation.proto
"""Generated protocol buffer code."""
from google.protobuf.internal import builder as _builder
from google.protobuf import descriptor as _descriptor
from google.protobuf import descriptor_pool as _descriptor_pool
from google.protobuf import symbol_database as _symbol_database
# @@protoc_insertion_point(imports)

_sym_db = _symbol_database.Default()


from google.protobuf import struct_pb2 as google_dot_protobuf_dot_struct__pb2


DESCRIPTOR = _descriptor_pool.Default().AddSerializedFile(b'\n/meterus/protocol/validation/v1/validation.proto\x12\rvalidation.v1\x1a\x1cgoogle/protobuf/struct.proto\"0\n\x15ValidateApiKeyRequest\x12\x17\n\x0frequired_scopes\x18\x01 \x03(\t\"Y\n\x0e\x41piKeyMetadata\x12\x0f\n\x07subject\x18\x01 \x01(\t\x12\x36\n\x15\x61\x64\x64itional_attributes\x18\x02 \x01(\x0b\x32\x17.google.protobuf.Struct\"I\n\x16ValidateApiKeyResponse\x12/\n\x08metadata\x18\x01 \x01(\x0b\x32\x1d.validation.v1.ApiKeyMetadata2r\n\x11ValidationService\x12]\n\x0eValidateApiKey\x12$.validation.v1.ValidateApiKeyRequest\x1a%.validation.v1.ValidateApiKeyResponseB/Z-github.com/elliot14A/meterus-go/validation/v1b\x06proto3')

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, 'meterus.protocol.validation.v1.validation_pb2', globals())
if _descriptor._USE_C_DESCRIPTORS == False:

  DESCRIPTOR._options = None
  DESCRIPTOR._serialized_options = b'Z-github.com/elliot14A/meterus-go/validation/v1'
  _VALIDATEAPIKEYREQUEST._serialized_start=96
  _VALIDATEAPIKEYREQUEST._serialized_end=144
  _APIKEYMETADATA._serialized_start=146
  _APIKEYMETADATA._serialized_end=235
  _VALIDATEAPIKEYRESPONSE._serialized_start=237
  _VALIDATEAPIKEYRESPONSE._serialized_end=310
  _VALIDATIONSERVICE._serialized_start=312
  _VALIDATIONSERVICE._serialized_end=426
# @@protoc_insertion_point(module_scope)
