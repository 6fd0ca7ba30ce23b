"""
Page Content Mapping

Static description of every searchable page: which translation keys hold
its text, and which keys give its title and description.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PageDescriptor:
    """A known page and the translation keys that make up its content."""

    url: str
    page_id: str
    nav_key: str
    content_keys: tuple[str, ...]

    @property
    def title_key(self) -> str:
        return f"nav.{self.nav_key}"

    @property
    def description_key(self) -> str:
        return f"meta.{self.page_id}Description"


def _numbered(prefix: str, count: int, fields: tuple[str, ...]) -> tuple[str, ...]:
    """Expand e.g. projects.project{n}.{name,description} for n in 1..count."""
    return tuple(
        f"{prefix}{n}.{field}" for n in range(1, count + 1) for field in fields
    )


DEFAULT_PAGES: tuple[PageDescriptor, ...] = (
    PageDescriptor(
        url="index.html",
        page_id="home",
        nav_key="home",
        content_keys=("home.name", "home.title", "home.intro"),
    ),
    PageDescriptor(
        url="about.html",
        page_id="about",
        nav_key="about",
        content_keys=(
            "about.professionalDesc",
            *_numbered("about.experience.job", 4, ("title", "description")),
            "about.education.master.degree",
            "about.education.master.description",
            "about.education.bachelor.degree",
            "about.education.bachelor.description",
            "about.references.ref1.name",
            "about.references.ref1.company",
        ),
    ),
    PageDescriptor(
        url="projects.html",
        page_id="projects",
        nav_key="projects",
        content_keys=_numbered(
            "projects.project", 7, ("name", "description", "skills")
        ),
    ),
    PageDescriptor(
        url="hobbies.html",
        page_id="hobbies",
        nav_key="hobbies",
        content_keys=(
            "hobbies.title",
            "hobbies.intro",
            "hobbies.webDev",
            "hobbies.webDevDesc",
            "hobbies.football",
            "hobbies.footballDesc",
            "hobbies.music",
            "hobbies.musicDesc",
            "hobbies.cars",
            "hobbies.carsDesc",
            "hobbies.peace",
            "hobbies.peaceDesc",
            "hobbies.problemSolving",
            "hobbies.problemSolvingDesc",
        ),
    ),
    PageDescriptor(
        url="contact.html",
        page_id="contact",
        nav_key="contact",
        content_keys=(
            "contact.title",
            "contact.socialMedia",
            "contact.email",
            "contact.phone",
            "contact.linkedin",
            "contact.github",
        ),
    ),
)
