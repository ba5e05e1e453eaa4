"""Tests for pure helpers"""

import json
import mimetypes
import os

import pytest

from components import _helpers


class TestBucketReadPolicy:
    def test_single_statement_for_principal(self):
        doc = json.loads(
            _helpers.bucket_read_policy("site-bucket", "arn:aws:iam::cloudfront:user/E1")
        )
        assert doc["Version"] == "2012-10-17"
        assert len(doc["Statement"]) == 1
        statement = doc["Statement"][0]
        assert statement["Effect"] == "Allow"
        assert statement["Principal"] == {"AWS": "arn:aws:iam::cloudfront:user/E1"}
        assert statement["Action"] == "s3:GetObject"
        assert statement["Resource"] == "arn:aws:s3:::site-bucket/*"

    def test_deterministic(self):
        first = _helpers.bucket_read_policy("b", "arn:p")
        assert first == _helpers.bucket_read_policy("b", "arn:p")

    def test_long_bucket_name(self):
        name = "a" * 63
        doc = json.loads(_helpers.bucket_read_policy(name, "arn:p"))
        assert doc["Statement"][0]["Resource"] == f"arn:aws:s3:::{name}/*"

    def test_rejects_empty_bucket(self):
        with pytest.raises(ValueError):
            _helpers.bucket_read_policy("", "arn:p")

    def test_rejects_empty_principal(self):
        with pytest.raises(ValueError):
            _helpers.bucket_read_policy("b", "")


class TestContentTypeFor:
    def test_html(self):
        assert _helpers.content_type_for("content/index.html") == "text/html"

    def test_css(self):
        assert _helpers.content_type_for("style.css") == "text/css"

    def test_unknown_extension(self):
        assert _helpers.content_type_for("blob.qqzzunknown") is None

    def test_no_extension(self):
        assert _helpers.content_type_for("LICENSE") is None

    def test_gzip_archive(self):
        assert _helpers.content_type_for("archive.gz") == "application/gzip"

    def test_compressed_payload_uses_encoding_type(self):
        assert _helpers.content_type_for("bundle.js.gz") == "application/gzip"
        assert _helpers.content_type_for("style.css.br") == "application/x-brotli"

    def test_ignores_host_mime_table(self):
        mimetypes.add_type("application/x-host-only", ".qqzzhostonly")
        assert mimetypes.guess_type("a.qqzzhostonly")[0] == "application/x-host-only"
        assert _helpers.content_type_for("a.qqzzhostonly") is None


class TestListSiteFiles:
    def test_one_entry_per_file(self, tmp_path):
        (tmp_path / "style.css").write_text("body {}")
        (tmp_path / "index.html").write_text("<html></html>")

        files, skipped = _helpers.list_site_files(str(tmp_path))

        assert [f.key for f in files] == ["index.html", "style.css"]
        assert [f.content_type for f in files] == ["text/html", "text/css"]
        assert files[0].path == os.path.join(str(tmp_path), "index.html")
        assert skipped == []

    def test_empty_directory(self, tmp_path):
        assert _helpers.list_site_files(str(tmp_path)) == ([], [])

    def test_unknown_extension_has_no_content_type(self, tmp_path):
        (tmp_path / "data.qqzzunknown").write_bytes(b"\x00")
        files, _ = _helpers.list_site_files(str(tmp_path))
        assert files[0].content_type is None

    def test_skips_subdirectories(self, tmp_path):
        (tmp_path / "index.html").write_text("")
        (tmp_path / "assets").mkdir()
        (tmp_path / "assets" / "logo.png").write_bytes(b"")

        files, skipped = _helpers.list_site_files(str(tmp_path))

        assert [f.key for f in files] == ["index.html"]
        assert skipped == ["assets"]

    def test_missing_directory(self, tmp_path):
        with pytest.raises(_helpers.SiteContentError):
            _helpers.list_site_files(str(tmp_path / "missing"))

    def test_file_instead_of_directory(self, tmp_path):
        path = tmp_path / "index.html"
        path.write_text("")
        with pytest.raises(_helpers.SiteContentError):
            _helpers.list_site_files(str(path))

    def test_unreadable_file(self, tmp_path, monkeypatch):
        (tmp_path / "index.html").write_text("")
        monkeypatch.setattr(_helpers.os, "access", lambda path, mode: False)
        with pytest.raises(_helpers.SiteContentError):
            _helpers.list_site_files(str(tmp_path))


class TestRecordName:
    def test_builds_www_subdomain(self):
        assert _helpers.record_name("abc.com", "www") == "www.abc.com"

    def test_domain_with_trailing_dot(self):
        assert _helpers.record_name("abc.com.", "www") == "www.abc.com"

    def test_zone_starting_with_label(self):
        assert _helpers.record_name("www.abc.com", "www") == "www.www.abc.com"

    def test_apex(self):
        assert _helpers.record_name("abc.com", "") == "abc.com"
