"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Meterus, a product of Garudex Labs

Subject façade: CRUD over the entities usage is attributed to.
"""

from __future__ import annotations

from typing import List, Optional

from meterus.protocol.subject.v1 import subject_pb2 as pb
from meterus.sdk.base import ServiceFacade


def _subject(id: str, display_name: Optional[str]) -> pb.Subject:
    message = pb.Subject(id=id)
    if display_name is not None:
        message.display_name = display_name
    return message


class SubjectService(ServiceFacade):
    """Operations on ``subject.v1.SubjectService``.

    Obtained from ``MeterusClient.new_subject_service()``.
    """

    SERVICE_NAME = pb.DESCRIPTOR.services_by_name["SubjectService"].full_name

    def create(self, id: str, display_name: Optional[str] = None, timeout: Optional[float] = None) -> pb.Subject:
        return self._call("CreateSubject", _subject(id, display_name), timeout=timeout)

    def get_by_id(self, id: str, timeout: Optional[float] = None) -> pb.Subject:
        return self._call("GetSubject", pb.SubjectId(subject_id=id), timeout=timeout)

    def list_by_id(self, page: int, limit: int, timeout: Optional[float] = None) -> List[pb.Subject]:
        """List all subjects, one page at a time (pages counted from 1)."""
        request = pb.ListSubjectRequest(limit=limit, page=page)
        return list(self._call("ListSubjects", request, timeout=timeout).subjects)

    def update(self, id: str, display_name: Optional[str] = None, timeout: Optional[float] = None) -> pb.Subject:
        """Replace a subject's display name; None clears it."""
        return self._call("UpdateSubject", _subject(id, display_name), timeout=timeout)

    def delete(self, id: str, timeout: Optional[float] = None) -> None:
        self._call("DeleteSubject", pb.SubjectId(subject_id=id), timeout=timeout)
