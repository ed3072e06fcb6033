"""Kubernetes-style name rules.

Each checker maps a string to a list of human-readable violations, mirroring
the apimachinery ``IsDNS1123*`` helpers. An empty list means the value is valid.
"""

from __future__ import annotations

import re

DNS1123_LABEL_MAX_LENGTH = 63
DNS1123_SUBDOMAIN_MAX_LENGTH = 253

DNS1123_LABEL_FMT = r"[a-z0-9]([-a-z0-9]*[a-z0-9])?"
DNS1123_SUBDOMAIN_FMT = rf"{DNS1123_LABEL_FMT}(\.{DNS1123_LABEL_FMT})*"

_LABEL_RE = re.compile(DNS1123_LABEL_FMT)
_SUBDOMAIN_RE = re.compile(DNS1123_SUBDOMAIN_FMT)

_LABEL_ERR = (
    "a DNS-1123 label must consist of lower case alphanumeric characters or '-', "
    "and must start and end with an alphanumeric character"
)
_SUBDOMAIN_ERR = (
    "a DNS-1123 subdomain must consist of lower case alphanumeric characters, "
    "'-' or '.', and must start and end with an alphanumeric character"
)


def _max_len_error(length: int) -> str:
    return f"must be no more than {length} characters"


def _regex_error(msg: str, fmt: str, *examples: str) -> str:
    quoted = " or ".join(f"'{e}'" for e in examples)
    return f"{msg} (e.g. {quoted}, regex used for validation is '{fmt}')"


def is_dns1123_label(value: str) -> list[str]:
    """Check that *value* is a DNS-1123 label (e.g. a namespace)."""
    errs: list[str] = []
    if len(value) > DNS1123_LABEL_MAX_LENGTH:
        errs.append(_max_len_error(DNS1123_LABEL_MAX_LENGTH))
    if not _LABEL_RE.fullmatch(value):
        errs.append(_regex_error(_LABEL_ERR, DNS1123_LABEL_FMT, "my-name", "123-abc"))
    return errs


def is_dns1123_subdomain(value: str) -> list[str]:
    """Check that *value* is a DNS-1123 subdomain.

    Reports the overall length limit, the character/shape rule, and any
    dot-separated label longer than 63 characters.
    """
    errs: list[str] = []
    if len(value) > DNS1123_SUBDOMAIN_MAX_LENGTH:
        errs.append(_max_len_error(DNS1123_SUBDOMAIN_MAX_LENGTH))
    if not _SUBDOMAIN_RE.fullmatch(value):
        errs.append(_regex_error(_SUBDOMAIN_ERR, DNS1123_SUBDOMAIN_FMT, "example.com"))
    long_labels = [label for label in value.split(".") if len(label) > DNS1123_LABEL_MAX_LENGTH]
    if long_labels:
        errs.append(f"each label {_max_len_error(DNS1123_LABEL_MAX_LENGTH)}")
    return errs
