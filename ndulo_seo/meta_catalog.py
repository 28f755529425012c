"""Per-route SEO metadata: the home record and the blog post catalog."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import NamedTuple, Optional

from ndulo_seo.structured_data import AUTHOR, SITE_URL, article_schema, person_schema


@dataclass(frozen=True)
class MetadataRecord:
    title: str
    description: str
    url: str
    og_image: str
    keywords: str
    author: str
    social_handle: str
    structured_data: Optional[str] = None


class PostMeta(NamedTuple):
    title: str
    description: str
    keywords: str


BLOG_POSTS = MappingProxyType({
    'clean-architecture-typescript': PostMeta(
        'Clean Architecture em TypeScript | Edgar Janota',
        'Guia de implementação de Clean Architecture em projetos Node.js e TypeScript, '
        'com exemplos práticos do projeto MODRESS e InstantPay.',
        'Clean Architecture, TypeScript, Node.js, DDD, Dependency Injection, '
        'Result Pattern, Functional Programming',
    ),
    'rust-vs-nodejs-performance': PostMeta(
        'Rust vs Node.js: Performance em Produção | Edgar Janota',
        'Análise técnica comparando Rust e Node.js em cenários reais. Benchmarks, '
        'trade-offs e quando usar cada tecnologia baseado em projetos reais.',
        'Rust, Node.js, Performance, Benchmarks, Backend Development, Systems Programming',
    ),
    'event-driven-microservices': PostMeta(
        'Arquitetura Event-Driven com SAGA Pattern | Edgar Janota',
        'Como implementei microservices event-driven com SAGA pattern no InstantPay. '
        'RabbitMQ, Redis, circuit breakers e eventual consistency.',
        'Microservices, Event-Driven Architecture, SAGA Pattern, RabbitMQ, Redis, '
        'Distributed Systems',
    ),
    'modress-case-study': PostMeta(
        'Case Study: MODRESS - Marketplace Angolano | Edgar Janota',
        'Como construímos o MODRESS, marketplace de moda que venceu a competição BNA. '
        'Stack técnica, desafios e soluções de arquitetura.',
        'MODRESS, Marketplace, TypeScript, React, PostgreSQL, Event-Driven, Angola Tech',
    ),
})

FALLBACK_POST = PostMeta(
    'Blog | Edgar Manuel Janota',
    'Artigos técnicos sobre desenvolvimento backend, arquitetura de software, '
    'performance e tecnologias modernas.',
    'Software Engineering, Backend Development, Architecture, Performance',
)


def lookup_post(blog_id: str) -> PostMeta:
    """Exact, case-sensitive match; anything unknown gets the generic blog copy."""
    return BLOG_POSTS.get(blog_id, FALLBACK_POST)


def home_metadata() -> MetadataRecord:
    return MetadataRecord(
        title=AUTHOR,
        description=(
            'Fullstack Developer especializado em TypeScript, Node.js, Clean Architecture, '
            'Microservices e Event-Driven Systems. '
        ),
        url=SITE_URL,
        og_image=f'{SITE_URL}/og-home.jpg',
        keywords=(
            'Edgar Janota, Fullstack Developer Angola, TypeScript Developer, Rust Developer, '
            'Clean Architecture, Microservices, Event-Driven Architecture, DDD, CQRS, '
            'SAGA Pattern, Node.js, React, PostgreSQL, Docker, MODRESS, InstantPay'
        ),
        author=AUTHOR,
        social_handle='@eddiendulo',
        structured_data=person_schema(),
    )


def blog_metadata(blog_id: str) -> MetadataRecord:
    # blog_id goes into the URLs raw; HTML escaping happens at render time.
    post = lookup_post(blog_id)
    return MetadataRecord(
        title=post.title,
        description=post.description,
        url=f'{SITE_URL}/blog/{blog_id}',
        og_image=f'{SITE_URL}/og-blog-{blog_id}.jpg',
        keywords=post.keywords,
        author=AUTHOR,
        social_handle='@edgarjanota',
        structured_data=article_schema(blog_id, post.title, post.description),
    )
