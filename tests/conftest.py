"""Test fixtures for sitesearch tests."""

import os

# Set ENVIRONMENT before importing any modules that read configuration
os.environ.setdefault("ENVIRONMENT", "test")

import pytest

from sitesearch.i18n.store import TranslationStore
from sitesearch.service import SearchService


@pytest.fixture
def translations():
    """A small two-language translations document."""
    return {
        "es": {
            "nav": {
                "home": "Inicio",
                "about": "Sobre mí",
                "projects": "Proyectos",
                "hobbies": "Aficiones",
                "contact": "Contacto",
            },
            "meta": {
                "homeTitle": "Inicio - Portafolio",
                "homeDescription": "Portafolio personal",
                "aboutDescription": "Experiencia y formación",
                "projectsDescription": "Proyectos destacados",
                "hobbiesDescription": "Lo que me gusta hacer",
                "contactDescription": "Cómo contactarme",
            },
            "home": {
                "name": "Ana García",
                "title": "Ingeniera de software",
                "intro": "Desarrollo aplicaciones en la nube.",
            },
            "about": {
                "professionalDesc": "Ingeniera con experiencia en computación en la nube.",
                "experience": {
                    "job1": {"title": "Desarrolladora", "description": "Migración a la nube"},
                },
            },
            "projects": {
                "project1": {
                    "name": "Buscador",
                    "description": "Búsqueda sin acentos",
                    "skills": "Python",
                },
            },
            "hobbies": {"title": "Aficiones", "music": "Música"},
            "contact": {},
            "search": {"noResults": "Sin resultados para"},
        },
        "en": {
            "nav": {
                "home": "Home",
                "about": "About Me",
                "projects": "Projects",
                "hobbies": "Hobbies",
                "contact": "Contact",
            },
            "meta": {
                "homeDescription": "Personal portfolio",
                "aboutDescription": "Experience and education",
                "projectsDescription": "Featured work",
                "hobbiesDescription": "What I enjoy",
                "contactDescription": "How to reach me",
            },
            "home": {
                "name": "Ana Garcia",
                "title": "Software engineer",
                "intro": "I build cloud applications.",
            },
            "about": {
                "professionalDesc": "Senior engineer with cloud experience",
            },
            "projects": {
                "project1": {
                    "name": "Site search",
                    "description": "Accent-insensitive search",
                    "skills": "Python",
                },
            },
            "hobbies": {"title": "Hobbies", "music": "Music"},
            "contact": {"email": "ana@example.com"},
        },
    }


@pytest.fixture
def store(translations):
    """A translation store loaded with the sample document."""
    store = TranslationStore(default_language="es")
    store.load(translations)
    return store


@pytest.fixture
def service(store):
    """A search service attached to the sample store."""
    service = SearchService(store)
    service.attach()
    return service
