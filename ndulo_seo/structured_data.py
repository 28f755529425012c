"""schema.org JSON-LD payloads embedded in the injected <head>."""

import json

SITE_URL = 'https://ndulo.pages.dev'
AUTHOR = 'Edgar Manuel Janota'


def _dumps(payload):
    # Compact, insertion-ordered, UTF-8 kept as-is.
    return json.dumps(payload, ensure_ascii=False, separators=(',', ':'))


def person_schema() -> str:
    """Profile of the site owner, used on the home page."""
    return _dumps({
        '@context': 'https://schema.org',
        '@type': 'Person',
        'name': AUTHOR,
        'alternateName': 'Ndulo',
        'jobTitle': 'Fullstack Developer & DevOps Engineer',
        'email': 'eddiendulo@gmail.com',
        'telephone': '+244925885405',
        'url': SITE_URL,
        'image': f'{SITE_URL}/avatar.jpg',
        'address': {
            '@type': 'PostalAddress',
            'addressLocality': 'Luanda',
            'addressCountry': 'AO',
        },
        'sameAs': [
            'https://github.com/ndulomk',
            'https://linkedin.com/in/edgar-manuel-janota-387329328',
        ],
        'knowsAbout': [
            'TypeScript',
            'Rust',
            'Node.js',
            'React',
            'Clean Architecture',
            'Microservices',
            'Event-Driven Architecture',
            'Domain-Driven Design',
            'PostgreSQL',
            'Docker',
            'CI/CD',
        ],
        'alumniOf': 'Software Engineering',
        'worksFor': {
            '@type': 'Organization',
            'name': 'MODRESS',
            'url': 'https://modress.shop',
        },
    })


def article_schema(blog_id: str, title: str, description: str) -> str:
    """TechArticle for a blog post. Values are interpolated unchecked."""
    return _dumps({
        '@context': 'https://schema.org',
        '@type': 'TechArticle',
        'headline': title,
        'description': description,
        'url': f'{SITE_URL}/blog/{blog_id}',
        'datePublished': '2024-01-01T00:00:00Z',
        'dateModified': '2024-01-01T00:00:00Z',
        'author': {
            '@type': 'Person',
            'name': AUTHOR,
            'url': SITE_URL,
        },
        'publisher': {
            '@type': 'Person',
            'name': AUTHOR,
        },
        'image': f'{SITE_URL}/og-blog-{blog_id}.jpg',
        'articleSection': 'Software Engineering',
        'inLanguage': 'pt-AO',
        'keywords': 'software architecture, backend development, typescript, rust',
    })
