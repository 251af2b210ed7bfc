"""The canonical catalog of projects, skills, services, hero stats and social links."""
from __future__ import annotations

from portfolio.catalog.models import Project, Service, Skill, SocialLink, Stat

PROJECTS = (
    Project(
        id=1,
        slug="defi",
        title_key="projects.items.defi.title",
        description_key="projects.items.defi.description",
        tags=("Next.js", "Solidity", "Tailwind"),
        variant="featured",
        image="/defi-dashboard-crypto-finance-dark-ui.jpg",
    ),
    Project(
        id=2,
        slug="neural",
        title_key="projects.items.neural.title",
        description_key="projects.items.neural.description",
        tags=("Python", "PyTorch"),
        category_key="projects.items.neural.category",
        variant="small",
    ),
    Project(
        id=3,
        slug="saas",
        title_key="projects.items.saas.title",
        description_key="projects.items.saas.description",
        variant="icon",
        stat_key="projects.items.saas.stat",
    ),
    Project(
        id=4,
        slug="fintech",
        title_key="projects.items.fintech.title",
        description_key="projects.items.fintech.description",
        tags=("TypeScript", "PostgreSQL"),
        variant="wide",
    ),
)

SKILLS = (
    Skill(slug="react", name_key="skills.items.react", icon="layers", category_key="skills.categories.frontend"),
    Skill(slug="typescript", name_key="skills.items.typescript", icon="file-code", category_key="skills.categories.frontend"),
    Skill(slug="python", name_key="skills.items.python", icon="code2", category_key="skills.categories.backend"),
    Skill(slug="postgresql", name_key="skills.items.postgresql", icon="database", category_key="skills.categories.database"),
    Skill(slug="aws", name_key="skills.items.aws", icon="cloud", category_key="skills.categories.devops"),
    Skill(slug="openai", name_key="skills.items.openai", icon="bot", category_key="skills.categories.ai"),
)


def _service(slug: str, icon: str) -> Service:
    return Service(
        slug=slug,
        title_key=f"services.cards.{slug}.title",
        description_key=f"services.cards.{slug}.description",
        icon=icon,
    )


SERVICES = (
    _service("custom-software", "code"),
    _service("legacy-migration", "refresh-cw"),
    _service("multi-platform", "monitor-smartphone"),
    _service("ai-integration", "brain-circuit"),
    _service("ux-ui-design", "pen-tool"),
    _service("landing-pages", "layout-template"),
)

STATS = (
    Stat(slug="achievements", value_key="stats.achievements.value", label_key="stats.achievements.label", icon="check-circle"),
    Stat(slug="experience", value_key="stats.experience.value", label_key="stats.experience.label", icon="award"),
    Stat(slug="mvps", value_key="stats.mvps.value", label_key="stats.mvps.label", icon="rocket"),
)

SOCIAL_LINKS = (
    SocialLink(slug="email", name_key="social.items.email.name", url="#", icon="at-sign"),
    SocialLink(slug="github", name_key="social.items.github.name", url="#", icon="terminal"),
)

ALL_ENTRIES = PROJECTS + SKILLS + SERVICES + STATS + SOCIAL_LINKS
