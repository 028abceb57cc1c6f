from __future__ import annotations

from ..client import CallBuilder, Hub, PagedCall, Param
from ..delegate import MethodInfo
from ..schema import Empty
from .schemas import (BatchCreateNotesRequest, BatchCreateNotesResponse,
                      BatchCreateOccurrencesRequest, BatchCreateOccurrencesResponse,
                      GetIamPolicyRequest, ListNoteOccurrencesResponse, ListNotesResponse,
                      ListOccurrencesResponse, Note, Occurrence, Policy, SetIamPolicyRequest,
                      TestIamPermissionsRequest, TestIamPermissionsResponse,
                      VulnerabilityOccurrencesSummary)


class Scope:
    """OAuth2 scopes of the API."""
    # See, edit, configure, and delete your Google Cloud data
    CLOUD_PLATFORM = "https://www.googleapis.com/auth/cloud-platform"
    DEFAULT = CLOUD_PLATFORM


class ContainerAnalysis(Hub):
    """Central instance to access all Container Analysis resource activities.

        hub = ContainerAnalysis(default_authenticator())
        _, notes = hub.projects().notes_list("projects/my-project").page_size(50).execute()
    """
    DEFAULT_BASE_URL = "https://containeranalysis.googleapis.com/"
    DEFAULT_ROOT_URL = "https://containeranalysis.googleapis.com/"
    ENV_PREFIX = "CONTAINERANALYSIS1"

    def projects(self) -> "ProjectMethods":
        return ProjectMethods(self)


class ProjectMethods:
    """Builders for all methods on *project* resources (notes and occurrences)."""

    def __init__(self, hub: ContainerAnalysis):
        self._hub = hub

    # -------------------- notes --------------------

    def notes_batch_create(self, request: BatchCreateNotesRequest, parent: str) -> "ProjectNoteBatchCreateCall":
        """Creates new notes in batch."""
        return ProjectNoteBatchCreateCall(self._hub, request, parent=parent)

    def notes_create(self, request: Note, parent: str) -> "ProjectNoteCreateCall":
        """Creates a new note."""
        return ProjectNoteCreateCall(self._hub, request, parent=parent)

    def notes_delete(self, name: str) -> "ProjectNoteDeleteCall":
        """Deletes the specified note."""
        return ProjectNoteDeleteCall(self._hub, name=name)

    def notes_get(self, name: str) -> "ProjectNoteGetCall":
        """Gets the specified note."""
        return ProjectNoteGetCall(self._hub, name=name)

    def notes_get_iam_policy(self, request: GetIamPolicyRequest, resource: str) -> "ProjectNoteGetIamPolicyCall":
        """Gets the access control policy for a note or an occurrence resource."""
        return ProjectNoteGetIamPolicyCall(self._hub, request, resource=resource)

    def notes_list(self, parent: str) -> "ProjectNoteListCall":
        """Lists notes for the specified project."""
        return ProjectNoteListCall(self._hub, parent=parent)

    def notes_occurrences_list(self, name: str) -> "ProjectNoteOccurrenceListCall":
        """Lists occurrences referencing the specified note, across consumer projects."""
        return ProjectNoteOccurrenceListCall(self._hub, name=name)

    def notes_patch(self, request: Note, name: str) -> "ProjectNotePatchCall":
        """Updates the specified note."""
        return ProjectNotePatchCall(self._hub, request, name=name)

    def notes_set_iam_policy(self, request: SetIamPolicyRequest, resource: str) -> "ProjectNoteSetIamPolicyCall":
        """Sets the access control policy on the specified note or occurrence."""
        return ProjectNoteSetIamPolicyCall(self._hub, request, resource=resource)

    def notes_test_iam_permissions(self, request: TestIamPermissionsRequest,
                                   resource: str) -> "ProjectNoteTestIamPermissionCall":
        """Returns the permissions that a caller has on the specified note or occurrence."""
        return ProjectNoteTestIamPermissionCall(self._hub, request, resource=resource)

    # -------------------- occurrences --------------------

    def occurrences_batch_create(self, request: BatchCreateOccurrencesRequest,
                                 parent: str) -> "ProjectOccurrenceBatchCreateCall":
        """Creates new occurrences in batch."""
        return ProjectOccurrenceBatchCreateCall(self._hub, request, parent=parent)

    def occurrences_create(self, request: Occurrence, parent: str) -> "ProjectOccurrenceCreateCall":
        """Creates a new occurrence."""
        return ProjectOccurrenceCreateCall(self._hub, request, parent=parent)

    def occurrences_delete(self, name: str) -> "ProjectOccurrenceDeleteCall":
        """Deletes the specified occurrence."""
        return ProjectOccurrenceDeleteCall(self._hub, name=name)

    def occurrences_get(self, name: str) -> "ProjectOccurrenceGetCall":
        """Gets the specified occurrence."""
        return ProjectOccurrenceGetCall(self._hub, name=name)

    def occurrences_get_iam_policy(self, request: GetIamPolicyRequest,
                                   resource: str) -> "ProjectOccurrenceGetIamPolicyCall":
        return ProjectOccurrenceGetIamPolicyCall(self._hub, request, resource=resource)

    def occurrences_get_notes(self, name: str) -> "ProjectOccurrenceGetNoteCall":
        """Gets the note attached to the specified occurrence."""
        return ProjectOccurrenceGetNoteCall(self._hub, name=name)

    def occurrences_get_vulnerability_summary(self, parent: str) -> "ProjectOccurrenceGetVulnerabilitySummaryCall":
        """Gets a summary of the number and severity of occurrences."""
        return ProjectOccurrenceGetVulnerabilitySummaryCall(self._hub, parent=parent)

    def occurrences_list(self, parent: str) -> "ProjectOccurrenceListCall":
        """Lists occurrences for the specified project."""
        return ProjectOccurrenceListCall(self._hub, parent=parent)

    def occurrences_patch(self, request: Occurrence, name: str) -> "ProjectOccurrencePatchCall":
        """Updates the specified occurrence."""
        return ProjectOccurrencePatchCall(self._hub, request, name=name)

    def occurrences_set_iam_policy(self, request: SetIamPolicyRequest,
                                   resource: str) -> "ProjectOccurrenceSetIamPolicyCall":
        return ProjectOccurrenceSetIamPolicyCall(self._hub, request, resource=resource)

    def occurrences_test_iam_permissions(self, request: TestIamPermissionsRequest,
                                         resource: str) -> "ProjectOccurrenceTestIamPermissionCall":
        return ProjectOccurrenceTestIamPermissionCall(self._hub, request, resource=resource)


_PARENT = Param("parent", location="path")
_NAME = Param("name", location="path")
_RESOURCE = Param("resource", location="path")


class _ProjectCall(CallBuilder):
    _default_scope = Scope.DEFAULT


class _ParentCall(_ProjectCall):
    _params = (_PARENT,)

    def parent(self, new_value: str):
        return self._set("parent", new_value)


class _NameCall(_ProjectCall):
    _params = (_NAME,)

    def name(self, new_value: str):
        return self._set("name", new_value)


class _ResourceCall(_ProjectCall):
    _params = (_RESOURCE,)

    def resource(self, new_value: str):
        return self._set("resource", new_value)


class _ListCall(PagedCall):
    """Shared options of the list methods: filter, page size and page token."""
    _default_scope = Scope.DEFAULT

    def filter(self, new_value: str):
        return self._set("filter", new_value)


class _PatchCall(_NameCall):
    _path = "v1/{+name}"
    _params = (_NAME, Param("updateMask"))

    def update_mask(self, new_value: str):
        """The fields to update, a comma separated field mask."""
        return self._set("updateMask", new_value)


# -------------------- notes --------------------

class ProjectNoteBatchCreateCall(_ParentCall):
    _info = MethodInfo("containeranalysis.projects.notes.batchCreate", "POST")
    _path = "v1/{+parent}/notes:batchCreate"
    _request = BatchCreateNotesRequest
    _response = BatchCreateNotesResponse


class ProjectNoteCreateCall(_ParentCall):
    _info = MethodInfo("containeranalysis.projects.notes.create", "POST")
    _path = "v1/{+parent}/notes"
    _params = (_PARENT, Param("noteId"))
    _request = Note
    _response = Note

    def note_id(self, new_value: str):
        """The ID to use for this note."""
        return self._set("noteId", new_value)


class ProjectNoteDeleteCall(_NameCall):
    _info = MethodInfo("containeranalysis.projects.notes.delete", "DELETE")
    _path = "v1/{+name}"
    _response = Empty


class ProjectNoteGetCall(_NameCall):
    _info = MethodInfo("containeranalysis.projects.notes.get", "GET")
    _path = "v1/{+name}"
    _response = Note


class ProjectNoteGetIamPolicyCall(_ResourceCall):
    _info = MethodInfo("containeranalysis.projects.notes.getIamPolicy", "POST")
    _path = "v1/{+resource}:getIamPolicy"
    _request = GetIamPolicyRequest
    _response = Policy


class ProjectNoteListCall(_ListCall):
    _info = MethodInfo("containeranalysis.projects.notes.list", "GET")
    _path = "v1/{+parent}/notes"
    _params = (_PARENT, Param("filter"), Param("pageSize", int), Param("pageToken"))
    _response = ListNotesResponse
    _items = "notes"

    def parent(self, new_value: str):
        return self._set("parent", new_value)


class ProjectNoteOccurrenceListCall(_ListCall):
    _info = MethodInfo("containeranalysis.projects.notes.occurrences.list", "GET")
    _path = "v1/{+name}/occurrences"
    _params = (_NAME, Param("filter"), Param("pageSize", int), Param("pageToken"))
    _response = ListNoteOccurrencesResponse
    _items = "occurrences"

    def name(self, new_value: str):
        return self._set("name", new_value)


class ProjectNotePatchCall(_PatchCall):
    _info = MethodInfo("containeranalysis.projects.notes.patch", "PATCH")
    _request = Note
    _response = Note


class ProjectNoteSetIamPolicyCall(_ResourceCall):
    _info = MethodInfo("containeranalysis.projects.notes.setIamPolicy", "POST")
    _path = "v1/{+resource}:setIamPolicy"
    _request = SetIamPolicyRequest
    _response = Policy


class ProjectNoteTestIamPermissionCall(_ResourceCall):
    _info = MethodInfo("containeranalysis.projects.notes.testIamPermissions", "POST")
    _path = "v1/{+resource}:testIamPermissions"
    _request = TestIamPermissionsRequest
    _response = TestIamPermissionsResponse


# -------------------- occurrences --------------------

class ProjectOccurrenceBatchCreateCall(_ParentCall):
    _info = MethodInfo("containeranalysis.projects.occurrences.batchCreate", "POST")
    _path = "v1/{+parent}/occurrences:batchCreate"
    _request = BatchCreateOccurrencesRequest
    _response = BatchCreateOccurrencesResponse


class ProjectOccurrenceCreateCall(_ParentCall):
    _info = MethodInfo("containeranalysis.projects.occurrences.create", "POST")
    _path = "v1/{+parent}/occurrences"
    _request = Occurrence
    _response = Occurrence


class ProjectOccurrenceDeleteCall(_NameCall):
    _info = MethodInfo("containeranalysis.projects.occurrences.delete", "DELETE")
    _path = "v1/{+name}"
    _response = Empty


class ProjectOccurrenceGetCall(_NameCall):
    _info = MethodInfo("containeranalysis.projects.occurrences.get", "GET")
    _path = "v1/{+name}"
    _response = Occurrence


class ProjectOccurrenceGetIamPolicyCall(_ResourceCall):
    _info = MethodInfo("containeranalysis.projects.occurrences.getIamPolicy", "POST")
    _path = "v1/{+resource}:getIamPolicy"
    _request = GetIamPolicyRequest
    _response = Policy


class ProjectOccurrenceGetNoteCall(_NameCall):
    _info = MethodInfo("containeranalysis.projects.occurrences.getNotes", "GET")
    _path = "v1/{+name}/notes"
    _response = Note


class ProjectOccurrenceGetVulnerabilitySummaryCall(_ParentCall):
    _info = MethodInfo("containeranalysis.projects.occurrences.getVulnerabilitySummary", "GET")
    _path = "v1/{+parent}/occurrences:vulnerabilitySummary"
    _params = (_PARENT, Param("filter"))
    _response = VulnerabilityOccurrencesSummary

    def filter(self, new_value: str):
        return self._set("filter", new_value)


class ProjectOccurrenceListCall(_ListCall):
    _info = MethodInfo("containeranalysis.projects.occurrences.list", "GET")
    _path = "v1/{+parent}/occurrences"
    _params = (_PARENT, Param("filter"), Param("pageSize", int), Param("pageToken"))
    _response = ListOccurrencesResponse
    _items = "occurrences"

    def parent(self, new_value: str):
        return self._set("parent", new_value)


class ProjectOccurrencePatchCall(_PatchCall):
    _info = MethodInfo("containeranalysis.projects.occurrences.patch", "PATCH")
    _request = Occurrence
    _response = Occurrence


class ProjectOccurrenceSetIamPolicyCall(_ResourceCall):
    _info = MethodInfo("containeranalysis.projects.occurrences.setIamPolicy", "POST")
    _path = "v1/{+resource}:setIamPolicy"
    _request = SetIamPolicyRequest
    _response = Policy


class ProjectOccurrenceTestIamPermissionCall(_ResourceCall):
    _info = MethodInfo("containeranalysis.projects.occurrences.testIamPermissions", "POST")
    _path = "v1/{+resource}:testIamPermissions"
    _request = TestIamPermissionsRequest
    _response = TestIamPermissionsResponse
