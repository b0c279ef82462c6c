# Ready-made profiles offered in the template gallery.
from __future__ import annotations
from dataclasses import dataclass
from typing import List

from readme_studio.profile import ProfileRecord, profile_from_dict

FILTERS = ["All", "Minimal", "Stylish", "Badges", "Stats", "Projects"]


@dataclass(frozen=True)
class Template:
    id: str
    name: str
    tags: tuple[str, ...]
    preview: str
    profile: ProfileRecord


_TEMPLATES = [
    {
        "id": "1",
        "name": "Minimal Developer",
        "tags": ["Minimal", "Clean"],
        "preview": "Simple and clean profile with essential information",
        "data": {
            "name": "Alex Johnson",
            "title": "Software Engineer",
            "bio": "Building elegant solutions to complex problems.",
            "skills": ["React", "TypeScript", "Node.js"],
            "socials": {"github": "alexjohnson"},
            "projects": [],
            "showStats": False,
            "showBadges": True,
        },
    },
    {
        "id": "2",
        "name": "Full Stack Pro",
        "tags": ["Stats", "Badges", "Stylish"],
        "preview": "Complete profile with stats, badges, and projects",
        "data": {
            "name": "Sarah Chen",
            "title": "Full Stack Developer",
            "bio": "Passionate about creating scalable web applications and contributing to open source.",
            "skills": ["JavaScript", "Python", "React", "Django", "PostgreSQL", "Docker"],
            "socials": {"github": "sarahchen", "linkedin": "sarahchen", "twitter": "sarahchen"},
            "projects": [
                {
                    "name": "E-Commerce Platform",
                    "description": "Modern shopping experience",
                    "link": "https://github.com/example/ecommerce",
                },
            ],
            "showStats": True,
            "showBadges": True,
        },
    },
    {
        "id": "3",
        "name": "Open Source Contributor",
        "tags": ["Stats", "Projects"],
        "preview": "Showcase your open source contributions",
        "data": {
            "name": "Mike Rodriguez",
            "title": "Open Source Enthusiast",
            "bio": "Contributing to the developer community one PR at a time.",
            "skills": ["Go", "Rust", "Kubernetes", "Linux"],
            "socials": {"github": "mikerodriguez"},
            "projects": [
                {
                    "name": "CLI Tool",
                    "description": "Productivity tool for developers",
                    "link": "https://github.com/example/cli-tool",
                },
                {
                    "name": "API Gateway",
                    "description": "High-performance API gateway",
                    "link": "https://github.com/example/gateway",
                },
            ],
            "showStats": True,
            "showBadges": False,
        },
    },
    {
        "id": "4",
        "name": "Designer & Developer",
        "tags": ["Stylish", "Minimal"],
        "preview": "Perfect blend of design and development",
        "data": {
            "name": "Emma Wilson",
            "title": "UI/UX Developer",
            "bio": "Crafting beautiful, user-centered digital experiences.",
            "skills": ["Figma", "React", "CSS", "Animation"],
            "socials": {"github": "emmawilson", "portfolio": "https://emmawilson.design"},
            "projects": [],
            "showStats": False,
            "showBadges": True,
        },
    },
    {
        "id": "5",
        "name": "Data Scientist",
        "tags": ["Badges", "Stats"],
        "preview": "Showcase your data science expertise",
        "data": {
            "name": "David Kim",
            "title": "Data Scientist & ML Engineer",
            "bio": "Transforming data into actionable insights using machine learning.",
            "skills": ["Python", "TensorFlow", "PyTorch", "Pandas", "SQL"],
            "socials": {"github": "davidkim", "linkedin": "davidkim"},
            "projects": [
                {
                    "name": "ML Pipeline",
                    "description": "Scalable machine learning pipeline",
                    "link": "https://github.com/example/ml-pipeline",
                },
            ],
            "showStats": True,
            "showBadges": True,
        },
    },
    {
        "id": "6",
        "name": "Mobile Developer",
        "tags": ["Minimal", "Projects"],
        "preview": "Focus on mobile development projects",
        "data": {
            "name": "Lisa Park",
            "title": "Mobile Developer",
            "bio": "Creating delightful mobile experiences for iOS and Android.",
            "skills": ["React Native", "Swift", "Kotlin", "Firebase"],
            "socials": {"github": "lisapark"},
            "projects": [
                {
                    "name": "Fitness App",
                    "description": "Cross-platform fitness tracking app",
                    "link": "https://github.com/example/fitness-app",
                },
                {
                    "name": "Chat Application",
                    "description": "Real-time messaging platform",
                    "link": "https://github.com/example/chat-app",
                },
            ],
            "showStats": False,
            "showBadges": True,
        },
    },
]

TEMPLATES: List[Template] = [
    Template(
        id=t["id"],
        name=t["name"],
        tags=tuple(t["tags"]),
        preview=t["preview"],
        profile=profile_from_dict(t["data"]),
    )
    for t in _TEMPLATES
]

# loaded by the "Auto-Generate" button
SAMPLE_PROFILE = profile_from_dict({
    "name": "John Doe",
    "title": "Full Stack Developer",
    "bio": "Passionate developer with expertise in modern web technologies. "
           "Love building scalable applications and contributing to open source.",
    "skills": ["JavaScript", "TypeScript", "React", "Node.js", "Python", "Docker"],
    "socials": {
        "github": "johndoe",
        "linkedin": "johndoe",
        "twitter": "johndoe",
        "portfolio": "https://johndoe.dev",
    },
    "projects": [
        {
            "name": "Awesome Project",
            "description": "A revolutionary web application",
            "link": "https://github.com/johndoe/awesome-project",
        },
    ],
    "showStats": True,
    "showBadges": True,
})


def filter_templates(tag: str = "All") -> List[Template]:
    if tag == "All":
        return list(TEMPLATES)
    return [t for t in TEMPLATES if tag in t.tags]


def get_template(template_id: str) -> Template:
    for t in TEMPLATES:
        if t.id == template_id:
            return t
    raise KeyError(f"No template with id {template_id!r}")
