import pytest

from radtools.config import RadToolsConfig
from radtools.web.app import create_app

BUTTON = """\
export default function Button({ label, size = 'md' }: { label: string; size?: string }) {
  return <button>{label}</button>;
}
"""


@pytest.fixture
def project(tmp_path, stylesheet):
    """A project root with a stylesheet, one component and one font file."""
    (tmp_path / "components" / "ui").mkdir(parents=True)
    (tmp_path / "components" / "ui" / "Button.tsx").write_text(BUTTON)
    (tmp_path / "public" / "fonts").mkdir(parents=True)
    (tmp_path / "public" / "fonts" / "Mondwest-Regular.woff2").write_bytes(b"")
    return tmp_path


@pytest.fixture
def app(project):
    app = create_app(RadToolsConfig(root=str(project)), overrides={"TESTING": True})
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def production_client(project):
    app = create_app(RadToolsConfig(root=str(project), environment="production"), overrides={"TESTING": True})
    return app.test_client()
