import pytest

from ndulo_seo.app import create_app

_INDEX_HTML = (
    '<!doctype html>\n'
    '<html lang="pt">\n'
    '<head>\n'
    '    <meta charset="utf-8">\n'
    '    <script type="module" src="/assets/index.js"></script>\n'
    '</head>\n'
    '<body>\n'
    '    <div id="root"></div>\n'
    '</body>\n'
    '</html>\n'
)


@pytest.fixture
def public_dir(tmp_path):
    public = tmp_path / 'public'
    (public / 'assets').mkdir(parents=True)
    (public / 'index.html').write_text(_INDEX_HTML, encoding='utf-8')
    (public / 'assets' / 'index.js').write_text("console.log('app');\n", encoding='utf-8')
    (public / 'robots.txt').write_text('User-agent: *\nAllow: /\n', encoding='utf-8')
    return public


@pytest.fixture
def app(public_dir):
    app = create_app({'TESTING': True, 'PUBLIC_DIR': str(public_dir)})
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def index_html():
    return _INDEX_HTML
