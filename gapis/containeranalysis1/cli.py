"""``containeranalysis1`` console script."""
import sys

from ..cli import Api, Method, run
from .api import ContainerAnalysis

_PROJECT = "The name of the project in the form of `projects/[PROJECT_ID]`."
_NOTE = "The name of the note in the form of `projects/[PROVIDER_ID]/notes/[NOTE_ID]`."
_OCCURRENCE = "The name of the occurrence in the form of `projects/[PROJECT_ID]/occurrences/[OCCURRENCE_ID]`."
_RESOURCE = "The resource the policy applies to, a note or an occurrence name."

_GET_IAM = "Gets the access control policy for a note or an occurrence resource."
_SET_IAM = "Sets the access control policy on the specified note or occurrence."
_TEST_IAM = "Returns the permissions that a caller has on the specified note or occurrence."

API = Api(
    name="containeranalysis1",
    hub=ContainerAnalysis,
    description="An implementation of the Grafeas API, which stores, and enables querying and "
                "retrieval of critical metadata about all of your software artifacts.",
    resources={
        "projects": [
            Method("notes-batch-create", "notes_batch_create", (("parent", _PROJECT),),
                   about="Creates new notes in batch."),
            Method("notes-create", "notes_create", (("parent", _PROJECT),), about="Creates a new note."),
            Method("notes-delete", "notes_delete", (("name", _NOTE),),
                   about="Deletes the specified note."),
            Method("notes-get", "notes_get", (("name", _NOTE),), about="Gets the specified note."),
            Method("notes-get-iam-policy", "notes_get_iam_policy", (("resource", _RESOURCE),),
                   about=_GET_IAM),
            Method("notes-list", "notes_list", (("parent", _PROJECT),),
                   about="Lists notes for the specified project."),
            Method("notes-occurrences-list", "notes_occurrences_list", (("name", _NOTE),),
                   about="Lists occurrences referencing the specified note."),
            Method("notes-patch", "notes_patch", (("name", _NOTE),), about="Updates the specified note."),
            Method("notes-set-iam-policy", "notes_set_iam_policy", (("resource", _RESOURCE),),
                   about=_SET_IAM),
            Method("notes-test-iam-permissions", "notes_test_iam_permissions", (("resource", _RESOURCE),),
                   about=_TEST_IAM),
            Method("occurrences-batch-create", "occurrences_batch_create", (("parent", _PROJECT),),
                   about="Creates new occurrences in batch."),
            Method("occurrences-create", "occurrences_create", (("parent", _PROJECT),),
                   about="Creates a new occurrence."),
            Method("occurrences-delete", "occurrences_delete", (("name", _OCCURRENCE),),
                   about="Deletes the specified occurrence."),
            Method("occurrences-get", "occurrences_get", (("name", _OCCURRENCE),),
                   about="Gets the specified occurrence."),
            Method("occurrences-get-iam-policy", "occurrences_get_iam_policy", (("resource", _RESOURCE),),
                   about=_GET_IAM),
            Method("occurrences-get-notes", "occurrences_get_notes", (("name", _OCCURRENCE),),
                   about="Gets the note attached to the specified occurrence."),
            Method("occurrences-get-vulnerability-summary", "occurrences_get_vulnerability_summary",
                   (("parent", _PROJECT),),
                   about="Gets a summary of the number and severity of occurrences."),
            Method("occurrences-list", "occurrences_list", (("parent", _PROJECT),),
                   about="Lists occurrences for the specified project."),
            Method("occurrences-patch", "occurrences_patch", (("name", _OCCURRENCE),),
                   about="Updates the specified occurrence."),
            Method("occurrences-set-iam-policy", "occurrences_set_iam_policy", (("resource", _RESOURCE),),
                   about=_SET_IAM),
            Method("occurrences-test-iam-permissions", "occurrences_test_iam_permissions",
                   (("resource", _RESOURCE),), about=_TEST_IAM),
        ],
    },
)


def main() -> None:
    sys.exit(run(API))
