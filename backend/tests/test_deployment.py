"""
Health Check Service — Deployment Artifact Checks
==================================================

What:  The container, Kubernetes and CI files exist and have the expected
       shape. Nothing here reads them at runtime; this guards the release.
"""

import re


class TestDockerfile:

    def test_has_required_directives(self, repo_root):
        dockerfile = repo_root / "Dockerfile"
        assert dockerfile.exists()

        content = dockerfile.read_text(encoding="utf-8")
        for directive in ("FROM", "WORKDIR", "COPY", "EXPOSE"):
            assert re.search(rf"^{directive}\s", content, re.MULTILINE), directive

    def test_exposes_default_port(self, repo_root):
        content = (repo_root / "Dockerfile").read_text(encoding="utf-8")
        assert re.search(r"^EXPOSE\s+3000\b", content, re.MULTILINE)


class TestKubernetesManifests:

    def test_deployment(self, repo_root):
        path = repo_root / "k8s" / "deployment.yaml"
        assert path.exists()

        content = path.read_text(encoding="utf-8")
        assert "apiVersion" in content
        assert re.search(r"kind:\s*Deployment", content)
        assert "path: /health" in content

    def test_service(self, repo_root):
        path = repo_root / "k8s" / "service.yaml"
        assert path.exists()

        content = path.read_text(encoding="utf-8")
        assert re.search(r"kind:\s*Service", content)
        assert "targetPort: 3000" in content


class TestCIPipeline:

    def test_has_test_and_build_jobs(self, repo_root):
        path = repo_root / ".github" / "workflows" / "ci.yml"
        assert path.exists()

        content = path.read_text(encoding="utf-8")
        assert re.search(r"^  test:", content, re.MULTILINE)
        assert re.search(r"^  build:", content, re.MULTILINE)
        assert re.search(r"^  deploy:", content, re.MULTILINE)
