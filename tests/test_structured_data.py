import json

from ndulo_seo.structured_data import SITE_URL, article_schema, person_schema


def test_person_schema_shape():
    data = json.loads(person_schema())
    assert data['@context'] == 'https://schema.org'
    assert data['name'] == 'Edgar Manuel Janota'
    assert data['address']['addressCountry'] == 'AO'
    assert data['worksFor'] == {'@type': 'Organization', 'name': 'MODRESS', 'url': 'https://modress.shop'}
    assert 'Rust' in data['knowsAbout']


def test_article_schema_keeps_inputs_verbatim():
    title = 'Análise: "Rust" & <Node.js>'
    description = 'Comparação técnica, sem escapes.'
    payload = article_schema('rust-vs-nodejs-performance', title, description)

    data = json.loads(payload)
    assert data['headline'] == title
    assert data['description'] == description
    assert data['url'] == SITE_URL + '/blog/rust-vs-nodejs-performance'
    assert data['image'] == SITE_URL + '/og-blog-rust-vs-nodejs-performance.jpg'
    # Non-ASCII text is not \u-escaped.
    assert 'Comparação técnica, sem escapes.' in payload


def test_article_schema_is_compact_and_ordered():
    payload = article_schema('x', 't', 'd')
    assert ': ' not in payload and ', "' not in payload
    assert payload.startswith('{"@context":"https://schema.org","@type":"TechArticle","headline":"t"')
