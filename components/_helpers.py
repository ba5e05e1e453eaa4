"""
Pure helpers for policy, content, and DNS naming. Testable without Pulumi runtime.

Used by the storage component (bucket_read_policy, list_site_files,
content_type_for) and the DNS component (record_name). No Pulumi types; all
functions accept and return plain Python types so they can be unit-tested
without a Pulumi stack.
"""

import json
import mimetypes
import os
from dataclasses import dataclass

POLICY_VERSION: str = "2012-10-17"

# Built-in table only; the host's /etc/mime.types is not consulted.
_MIME_TYPES = mimetypes.MimeTypes()

# A compressed file is served as its archive type, not the type of its payload.
ENCODING_CONTENT_TYPES: dict[str, str] = {
    "gzip": "application/gzip",
    "bzip2": "application/x-bzip2",
    "xz": "application/x-xz",
    "br": "application/x-brotli",
    "compress": "application/x-compress",
}


class SiteContentError(Exception):
    """Raised when the local content directory cannot be turned into objects."""


@dataclass(frozen=True)
class SiteFile:
    """
    One regular file from the content directory.

    Attributes:
        key: Object key in the bucket (the file name).
        path: Local path handed to pulumi.FileAsset.
        content_type: MIME type from the extension, or None when unknown.
    """

    key: str
    path: str
    content_type: str | None


def bucket_read_policy(
    bucket_name: str,
    principal_arn: str,
) -> str:
    """
    Return a bucket policy granting s3:GetObject on every object to one principal.

    Both arguments are resolved values (e.g. from Output.all(...).apply), never
    placeholders. Output is deterministic for the same inputs.

    Args:
        bucket_name: Bucket name (not ARN); the resource is
            ``arn:aws:s3:::<bucket_name>/*``.
        principal_arn: IAM ARN of the origin access identity.

    Raises:
        ValueError: If either value is empty.
    """
    if not bucket_name:
        raise ValueError("bucket_name must not be empty")
    if not principal_arn:
        raise ValueError("principal_arn must not be empty")
    return json.dumps(
        {
            "Version": POLICY_VERSION,
            "Statement": [
                {
                    "Effect": "Allow",
                    "Principal": {"AWS": principal_arn},
                    "Action": "s3:GetObject",
                    "Resource": f"arn:aws:s3:::{bucket_name}/*",
                }
            ],
        }
    )


def content_type_for(
    path: str,
) -> str | None:
    """
    Return the MIME type for path's extension, or None if unrecognized.

    Compressed files (e.g. ``bundle.js.gz``) map to the archive type of their
    encoding, since the stored bytes are the compressed ones.
    """
    content_type, encoding = _MIME_TYPES.guess_type(path)
    if encoding is not None:
        return ENCODING_CONTENT_TYPES.get(encoding)
    return content_type


def list_site_files(
    directory: str,
) -> tuple[list[SiteFile], list[str]]:
    """
    Enumerate the direct entries of the content directory.

    Not recursive. Regular files become SiteFile entries keyed by file name;
    anything else (subdirectories, sockets, broken links) is returned in the
    skipped list so the caller can report it.

    Args:
        directory: Local content directory.

    Returns:
        (files, skipped): files sorted by key, and names of skipped entries.

    Raises:
        SiteContentError: If the directory is missing or not a directory, or a
            regular file in it cannot be read.
    """
    if not os.path.isdir(directory):
        raise SiteContentError(f"content directory not found: {directory}")

    files: list[SiteFile] = []
    skipped: list[str] = []
    for entry in sorted(os.listdir(directory)):
        path = os.path.join(directory, entry)
        if not os.path.isfile(path):
            skipped.append(entry)
            continue
        # Checked here so a bad file aborts before any object is declared.
        if not os.access(path, os.R_OK):
            raise SiteContentError(f"content file is not readable: {path}")
        files.append(SiteFile(key=entry, path=path, content_type=content_type_for(path)))
    return files, skipped


def record_name(
    domain: str,
    subdomain: str,
) -> str:
    """
    Build a Route 53 record name like 'www.example.com' from domain and subdomain.

    Route 53 accepts names without a trailing dot, so any trailing dot on the
    domain is dropped. An empty subdomain yields the apex. The label is always
    prepended, so zone "www.example.com" with "www" gives "www.www.example.com".
    """
    base = domain.rstrip(".")
    return f"{subdomain}.{base}" if subdomain else base
