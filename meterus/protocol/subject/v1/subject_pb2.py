# -*- coding: utf-8 -*-
# Generated by the protocol buffer compiler.  DO NOT EDIT!
# source: meterus/protocol/subject/v1/subject.proto
"""Generated protocol buffer code."""
from google.protobuf.internal import builder as _builder
from google.protobuf import descriptor as _descriptor
from google.protobuf import descriptor_pool as _descriptor_pool
from google.protobuf import symbol_database as _symbol_database
# @@protoc_insertion_point(imports)

_sym_db = _symbol_database.Default()


from google.protobuf import empty_pb2 as google_dot_protobuf_dot_empty__pb2


DESCRIPTOR = _descriptor_pool.Default().AddSerializedFile(b'\n)meterus/protocol/subject/v1/subject.proto\x12\nsubject.v1\x1a\x1bgoogle/protobuf/empty.proto\"A\n\x07Subject\x12\n\n\x02id\x18\x01 \x01(\t\x12\x19\n\x0c\x64isplay_name\x18\x02 \x01(\tH\x00\x88\x01\x01\x42\x0f\n\r_display_name\"\x1f\n\tSubjectId\x12\x12\n\nsubject_id\x18\x01 \x01(\t\"1\n\x12ListSubjectRequest\x12\r\n\x05limit\x18\x01 \x01(\x05\x12\x0c\n\x04page\x18\x02 \x01(\x05\"=\n\x14ListSubjectsResponse\x12%\n\x08subjects\x18\x01 \x03(\x0b\x32\x13.subject.v1.Subject2\xd2\x02\n\x0eSubjectService\x12\x39\n\rCreateSubject\x12\x13.subject.v1.Subject\x1a\x13.subject.v1.Subject\x12\x38\n\nGetSubject\x12\x15.subject.v1.SubjectId\x1a\x13.subject.v1.Subject\x12P\n\x0cListSubjects\x12\x1e.subject.v1.ListSubjectRequest\x1a .subject.v1.ListSubjectsResponse\x12\x39\n\rUpdateSubject\x12\x13.subject.v1.Subject\x1a\x13.subject.v1.Subject\x12>\n\rDeleteSubject\x12\x15.subject.v1.SubjectId\x1a\x16.google.protobuf.EmptyB,Z*github.com/elliot14A/meterus-go/subject/v1b\x06proto3')

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, 'meterus.protocol.subject.v1.subject_pb2', globals())
if _descriptor._USE_C_DESCRIPTORS == False:

  DESCRIPTOR._options = None
  DESCRIPTOR._serialized_options = b'Z*github.com/elliot14A/meterus-go/subject/v1'
  _SUBJECT._serialized_start=86
  _SUBJECT._serialized_end=151
  _SUBJECTID._serialized_start=153
  _SUBJECTID._serialized_end=184
  _LISTSUBJECTREQUEST._serialized_start=186
  _LISTSUBJECTREQUEST._serialized_end=235
  _LISTSUBJECTSRESPONSE._serialized_start=237
  _LISTSUBJECTSRESPONSE._serialized_end=298
  _SUBJECTSERVICE._serialized_start=301
  _SUBJECTSERVICE._serialized_end=639
# @@protoc_insertion_point(module_scope)
