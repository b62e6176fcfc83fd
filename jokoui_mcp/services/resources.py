"""
Readable catalog snapshots.

Resources are addressed by fixed URIs: the full catalog, one list per category,
and a static introduction document.
"""
import json
from dataclasses import dataclass
from typing import Dict, List, Optional

from jokoui_mcp.models.schemas.component_catalog import CatalogStore, Category

ALL_COMPONENTS_URI = "jokoui://components/all"
INTRODUCTION_URI = "jokoui://docs/introduction"
JSON_MIME = "application/json"
MARKDOWN_MIME = "text/markdown"
TEXT_MIME = "text/plain"


def category_uri(category: Category) -> str:
    return f"jokoui://components/{category.value}"


@dataclass(frozen=True)
class ResourceDescriptor:
    uri: str
    name: str
    description: str
    mime_type: str

    def to_payload(self) -> Dict[str, str]:
        return {
            "uri": self.uri,
            "name": self.name,
            "description": self.description,
            "mimeType": self.mime_type,
        }


@dataclass(frozen=True)
class ResourceContent:
    uri: str
    mime_type: str
    text: str


RESOURCE_DESCRIPTORS: List[ResourceDescriptor] = [
    ResourceDescriptor(
        uri=ALL_COMPONENTS_URI,
        name="All Joko UI Components",
        description="Complete list of all available Joko UI components with full details",
        mime_type=JSON_MIME,
    ),
    ResourceDescriptor(
        uri=category_uri(Category.APPLICATION),
        name="Application Components",
        description=(
            "Application UI components (alerts, avatars, badges, buttons, cards, forms, "
            "loaders, navbars, progress, sidebars, skeleton, breadcrumbs)"
        ),
        mime_type=JSON_MIME,
    ),
    ResourceDescriptor(
        uri=category_uri(Category.MARKETING),
        name="Marketing Components",
        description=(
            "Marketing UI components (banners, ctas, description-list, faq, footers, "
            "headers, heroes, pricing, stats, teams, testimonials)"
        ),
        mime_type=JSON_MIME,
    ),
    ResourceDescriptor(
        uri=INTRODUCTION_URI,
        name="Joko UI Introduction",
        description="Introduction and getting started guide for Joko UI",
        mime_type=MARKDOWN_MIME,
    ),
]


INTRODUCTION_DOCUMENT = """# Joko UI - Free Open Source Tailwind CSS Components

Joko UI is a collection of free Tailwind CSS components that you can use in your next project.

## Getting Started

There is no Joko UI installation. If you have a Tailwind CSS project, you can simply copy code and paste it into your project.

## Usage

1. Browse the website for a component you need
2. Preview the component at different breakpoints (Mobile, Tablet, Desktop)
3. Toggle **Dark Mode** to see how it looks in dark themes
4. Click on the **'Code'** tab or the **'Copy Code'** button to get the source
5. Paste the copied code into your project

**Note**

All components support both Light and Dark modes out of the box using Tailwind's `dark:` modifier.

## Component Categories

### [Application](/components/application)

UI components for building functional web applications:

- Alerts
- Avatars
- Badges
- Buttons
- Cards
- Forms
- Loaders
- Navbars
- Progress
- Sidebars
- Skeleton
- Breadcrumbs

### [Marketing](/components/marketing)

Components for building high-converting landing pages:

- Banners
- CTAs
- Description Lists
- FAQs
- Footers
- Headers
- Heroes
- Pricing
- Stats
- Teams
- Testimonials

## Server Tools

This server provides tools to:

- **list_components** / **search_components**: Explore the catalog
- **get_component_code**: Generate a starter stub for a component
- **fetch_component**: Fetch actual code from the Joko UI repository
- **implement_component**: Write code to a file
- **fetch_and_implement_component**: Do both in one step

## Features

- **No Config**: Works with standard Tailwind setup
- **No Install**: No npm packages to manage
- **No Setup**: Just copy, paste, and customize
- **Dark Mode**: All components support light and dark modes
- **Up to Date**: Fetches directly from the GitHub repository

## Website

Visit https://jokoui.web.id for the complete component library.
"""


class CatalogResources:
    """Renders resource documents from the current catalog."""

    def __init__(self, store: CatalogStore):
        self.store = store

    def list_resources(self) -> List[ResourceDescriptor]:
        return list(RESOURCE_DESCRIPTORS)

    def _components_json(self, category: Optional[Category] = None) -> str:
        records = self.store.by_category(category)
        return json.dumps([r.to_payload() for r in records], indent=2)

    def read(self, uri: str) -> ResourceContent:
        if uri == ALL_COMPONENTS_URI:
            return ResourceContent(uri, JSON_MIME, self._components_json())
        for category in Category.ordered():
            if uri == category_uri(category):
                return ResourceContent(uri, JSON_MIME, self._components_json(category))
        if uri == INTRODUCTION_URI:
            return ResourceContent(uri, MARKDOWN_MIME, INTRODUCTION_DOCUMENT)
        return ResourceContent(uri, TEXT_MIME, f"Resource not found: {uri}")
