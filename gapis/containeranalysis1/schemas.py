"""Container Analysis v1 (Grafeas) resources.

Only the commonly used parts of the deeply nested provenance and in-toto
structures are modelled; everything else round-trips through
``additional_properties`` or plain JSON dicts.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..schema import Schema, json_field


# -------------------- shared --------------------

@dataclass
class RelatedUrl(Schema):
    url: Optional[str] = None
    label: Optional[str] = None


@dataclass
class Status(Schema):
    """An error status with a code, a message and optional details."""
    code: Optional[int] = None
    message: Optional[str] = None
    details: Optional[List[Dict[str, Any]]] = None


@dataclass
class Version(Schema):
    epoch: Optional[int] = None
    name: Optional[str] = None
    revision: Optional[str] = None
    inclusive: Optional[bool] = None
    # NORMAL, MINIMUM or MAXIMUM
    kind: Optional[str] = None
    full_name: Optional[str] = None


@dataclass
class Fingerprint(Schema):
    v1_name: Optional[str] = None
    v2_blob: Optional[List[str]] = None
    v2_name: Optional[str] = None


@dataclass
class Envelope(Schema):
    payload: Optional[str] = None
    payload_type: Optional[str] = None
    signatures: Optional[List[Dict[str, Any]]] = None


@dataclass
class Hint(Schema):
    human_readable_name: Optional[str] = None


@dataclass
class Identity(Schema):
    revision: Optional[int] = None
    update_id: Optional[str] = None


@dataclass
class Category(Schema):
    category_id: Optional[str] = None
    name: Optional[str] = None


@dataclass
class WindowsUpdate(Schema):
    identity: Optional[Identity] = None
    title: Optional[str] = None
    description: Optional[str] = None
    categories: Optional[List[Category]] = None
    kb_article_ids: Optional[List[str]] = None
    support_url: Optional[str] = None
    last_published_timestamp: Optional[str] = None


@dataclass
class Distribution(Schema):
    cpe_uri: Optional[str] = None
    architecture: Optional[str] = None
    latest_version: Optional[Version] = None
    maintainer: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None


@dataclass
class UpgradeDistribution(Schema):
    cpe_uri: Optional[str] = None
    classification: Optional[str] = None
    severity: Optional[str] = None
    cve: Optional[List[str]] = None


@dataclass
class CVSSv3(Schema):
    base_score: Optional[float] = None
    exploitability_score: Optional[float] = None
    impact_score: Optional[float] = None
    attack_vector: Optional[str] = None
    attack_complexity: Optional[str] = None
    privileges_required: Optional[str] = None
    user_interaction: Optional[str] = None
    scope: Optional[str] = None
    confidentiality_impact: Optional[str] = None
    integrity_impact: Optional[str] = None
    availability_impact: Optional[str] = None


@dataclass
class CVSS(Schema):
    """Common Vulnerability Scoring System, as attached to occurrences."""
    base_score: Optional[float] = None
    exploitability_score: Optional[float] = None
    impact_score: Optional[float] = None
    attack_vector: Optional[str] = None
    attack_complexity: Optional[str] = None
    authentication: Optional[str] = None
    privileges_required: Optional[str] = None
    user_interaction: Optional[str] = None
    scope: Optional[str] = None
    confidentiality_impact: Optional[str] = None
    integrity_impact: Optional[str] = None
    availability_impact: Optional[str] = None


# -------------------- note kinds --------------------

@dataclass
class Detail(Schema):
    severity_name: Optional[str] = None
    description: Optional[str] = None
    package_type: Optional[str] = None
    affected_cpe_uri: Optional[str] = None
    affected_package: Optional[str] = None
    affected_version_start: Optional[Version] = None
    affected_version_end: Optional[Version] = None
    fixed_cpe_uri: Optional[str] = None
    fixed_package: Optional[str] = None
    fixed_version: Optional[Version] = None
    is_obsolete: Optional[bool] = None
    source_update_time: Optional[str] = None
    source: Optional[str] = None
    vendor: Optional[str] = None


@dataclass
class VulnerabilityNote(Schema):
    cvss_score: Optional[float] = None
    severity: Optional[str] = None
    details: Optional[List[Detail]] = None
    cvss_v3: Optional[CVSSv3] = None
    windows_details: Optional[List[Dict[str, Any]]] = None
    source_update_time: Optional[str] = None


@dataclass
class BuildNote(Schema):
    builder_version: Optional[str] = None


@dataclass
class ImageNote(Schema):
    resource_url: Optional[str] = None
    fingerprint: Optional[Fingerprint] = None


@dataclass
class PackageNote(Schema):
    name: Optional[str] = None
    distribution: Optional[List[Distribution]] = None


@dataclass
class DeploymentNote(Schema):
    resource_uri: Optional[List[str]] = None


@dataclass
class DiscoveryNote(Schema):
    analysis_kind: Optional[str] = None


@dataclass
class AttestationNote(Schema):
    hint: Optional[Hint] = None


@dataclass
class UpgradeNote(Schema):
    package: Optional[str] = None
    version: Optional[Version] = None
    distributions: Optional[List[UpgradeDistribution]] = None
    windows_update: Optional[WindowsUpdate] = None


@dataclass
class CisBenchmark(Schema):
    profile_level: Optional[int] = None
    severity: Optional[str] = None


@dataclass
class ComplianceNote(Schema):
    title: Optional[str] = None
    description: Optional[str] = None
    version: Optional[List[Dict[str, Any]]] = None
    rationale: Optional[str] = None
    remediation: Optional[str] = None
    cis_benchmark: Optional[CisBenchmark] = None
    scan_instructions: Optional[str] = None


@dataclass
class DSSEAttestationNote(Schema):
    hint: Optional[Hint] = None


@dataclass
class Note(Schema):
    """A type of analysis that can be done for a resource."""
    name: Optional[str] = None
    short_description: Optional[str] = None
    long_description: Optional[str] = None
    kind: Optional[str] = None
    related_url: Optional[List[RelatedUrl]] = None
    expiration_time: Optional[str] = None
    create_time: Optional[str] = None
    update_time: Optional[str] = None
    related_note_names: Optional[List[str]] = None
    vulnerability: Optional[VulnerabilityNote] = None
    build: Optional[BuildNote] = None
    image: Optional[ImageNote] = None
    package: Optional[PackageNote] = None
    deployment: Optional[DeploymentNote] = None
    discovery: Optional[DiscoveryNote] = None
    attestation: Optional[AttestationNote] = None
    upgrade: Optional[UpgradeNote] = None
    compliance: Optional[ComplianceNote] = None
    dsse_attestation: Optional[DSSEAttestationNote] = None


# -------------------- occurrence kinds --------------------

@dataclass
class PackageIssue(Schema):
    affected_cpe_uri: Optional[str] = None
    affected_package: Optional[str] = None
    affected_version: Optional[Version] = None
    fixed_cpe_uri: Optional[str] = None
    fixed_package: Optional[str] = None
    fixed_version: Optional[Version] = None
    fix_available: Optional[bool] = None
    package_type: Optional[str] = None
    effective_severity: Optional[str] = None


@dataclass
class VulnerabilityOccurrence(Schema):
    type_: Optional[str] = None
    severity: Optional[str] = None
    cvss_score: Optional[float] = None
    cvssv3: Optional[CVSS] = None
    package_issue: Optional[List[PackageIssue]] = None
    short_description: Optional[str] = None
    long_description: Optional[str] = None
    related_urls: Optional[List[RelatedUrl]] = None
    effective_severity: Optional[str] = None
    fix_available: Optional[bool] = None


@dataclass
class BuildProvenance(Schema):
    id: Optional[str] = None
    project_id: Optional[str] = None
    commands: Optional[List[Dict[str, Any]]] = None
    built_artifacts: Optional[List[Dict[str, Any]]] = None
    create_time: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    creator: Optional[str] = None
    logs_uri: Optional[str] = None
    source_provenance: Optional[Dict[str, Any]] = None
    trigger_id: Optional[str] = None
    build_options: Optional[Dict[str, str]] = None
    builder_version: Optional[str] = None


@dataclass
class InTotoStatement(Schema):
    """An in-toto attestation statement; its type travels as ``_type``."""
    type_: Optional[str] = json_field("_type")
    subject: Optional[List[Dict[str, Any]]] = None
    predicate_type: Optional[str] = None
    provenance: Optional[Dict[str, Any]] = None
    slsa_provenance: Optional[Dict[str, Any]] = None


@dataclass
class BuildOccurrence(Schema):
    provenance: Optional[BuildProvenance] = None
    provenance_bytes: Optional[str] = None
    intoto_provenance: Optional[Dict[str, Any]] = None
    intoto_statement: Optional[InTotoStatement] = None


@dataclass
class Layer(Schema):
    directive: Optional[str] = None
    arguments: Optional[str] = None


@dataclass
class ImageOccurrence(Schema):
    fingerprint: Optional[Fingerprint] = None
    distance: Optional[int] = None
    layer_info: Optional[List[Layer]] = None
    base_resource_url: Optional[str] = None


@dataclass
class Location(Schema):
    cpe_uri: Optional[str] = None
    version: Optional[Version] = None
    path: Optional[str] = None


@dataclass
class PackageOccurrence(Schema):
    name: Optional[str] = None
    location: Optional[List[Location]] = None


@dataclass
class DeploymentOccurrence(Schema):
    user_email: Optional[str] = None
    deploy_time: Optional[str] = None
    undeploy_time: Optional[str] = None
    config: Optional[str] = None
    address: Optional[str] = None
    resource_uri: Optional[List[str]] = None
    platform: Optional[str] = None


@dataclass
class DiscoveryOccurrence(Schema):
    continuous_analysis: Optional[str] = None
    analysis_status: Optional[str] = None
    analysis_status_error: Optional[Status] = None
    cpe: Optional[str] = None
    last_scan_time: Optional[str] = None
    archive_time: Optional[str] = None


@dataclass
class AttestationOccurrence(Schema):
    serialized_payload: Optional[str] = None
    signatures: Optional[List[Dict[str, Any]]] = None
    jwts: Optional[List[Dict[str, Any]]] = None


@dataclass
class UpgradeOccurrence(Schema):
    package: Optional[str] = None
    parsed_version: Optional[Version] = None
    distribution: Optional[UpgradeDistribution] = None
    windows_update: Optional[WindowsUpdate] = None


@dataclass
class ComplianceOccurrence(Schema):
    non_compliant_files: Optional[List[Dict[str, Any]]] = None
    non_compliance_reason: Optional[str] = None


@dataclass
class DSSEAttestationOccurrence(Schema):
    envelope: Optional[Envelope] = None
    statement: Optional[InTotoStatement] = None


@dataclass
class Occurrence(Schema):
    """An instance of a Note, or type of analysis that can be done for a resource."""
    name: Optional[str] = None
    resource_uri: Optional[str] = None
    note_name: Optional[str] = None
    kind: Optional[str] = None
    remediation: Optional[str] = None
    create_time: Optional[str] = None
    update_time: Optional[str] = None
    vulnerability: Optional[VulnerabilityOccurrence] = None
    build: Optional[BuildOccurrence] = None
    image: Optional[ImageOccurrence] = None
    package: Optional[PackageOccurrence] = None
    deployment: Optional[DeploymentOccurrence] = None
    discovery: Optional[DiscoveryOccurrence] = None
    attestation: Optional[AttestationOccurrence] = None
    upgrade: Optional[UpgradeOccurrence] = None
    compliance: Optional[ComplianceOccurrence] = None
    dsse_attestation: Optional[DSSEAttestationOccurrence] = None
    envelope: Optional[Envelope] = None


# -------------------- IAM --------------------

@dataclass
class Expr(Schema):
    expression: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None


@dataclass
class Binding(Schema):
    role: Optional[str] = None
    members: Optional[List[str]] = None
    condition: Optional[Expr] = None


@dataclass
class Policy(Schema):
    version: Optional[int] = None
    bindings: Optional[List[Binding]] = None
    # base64 encoded
    etag: Optional[str] = None


@dataclass
class GetPolicyOptions(Schema):
    requested_policy_version: Optional[int] = None


@dataclass
class GetIamPolicyRequest(Schema):
    options: Optional[GetPolicyOptions] = None


@dataclass
class SetIamPolicyRequest(Schema):
    policy: Optional[Policy] = None


@dataclass
class TestIamPermissionsRequest(Schema):
    permissions: Optional[List[str]] = None


@dataclass
class TestIamPermissionsResponse(Schema):
    permissions: Optional[List[str]] = None


# -------------------- batch, list, summary --------------------

@dataclass
class BatchCreateNotesRequest(Schema):
    """Notes keyed by the note id to create them under."""
    notes: Optional[Dict[str, Note]] = None


@dataclass
class BatchCreateNotesResponse(Schema):
    notes: Optional[List[Note]] = None


@dataclass
class BatchCreateOccurrencesRequest(Schema):
    occurrences: Optional[List[Occurrence]] = None


@dataclass
class BatchCreateOccurrencesResponse(Schema):
    occurrences: Optional[List[Occurrence]] = None


@dataclass
class ListNotesResponse(Schema):
    notes: Optional[List[Note]] = None
    next_page_token: Optional[str] = None


@dataclass
class ListOccurrencesResponse(Schema):
    occurrences: Optional[List[Occurrence]] = None
    next_page_token: Optional[str] = None


@dataclass
class ListNoteOccurrencesResponse(Schema):
    occurrences: Optional[List[Occurrence]] = None
    next_page_token: Optional[str] = None


@dataclass
class FixableTotalByDigest(Schema):
    resource_uri: Optional[str] = None
    severity: Optional[str] = None
    # int64 values travel as strings
    fixable_count: Optional[str] = None
    total_count: Optional[str] = None


@dataclass
class VulnerabilityOccurrencesSummary(Schema):
    counts: Optional[List[FixableTotalByDigest]] = None
