"""Boilerplate React stub for a catalog component."""
import re

from jokoui_mcp.models.schemas.component_catalog import ComponentRecord

_WHITESPACE = re.compile(r"\s+")

COMPONENT_TEMPLATE = """import React from 'react';

/**
 * {name}
 * {description}
 *
 * Category: {category}
 * Tags: {tags}
 *
 * @see {url}
 */
export function {symbol}() {{
  return (
    <div className="w-full">
      <div className="p-8 text-center">
        <h1 className="text-2xl font-bold mb-4">{name}</h1>
        <p className="text-gray-600 dark:text-gray-400">
          {description}
        </p>
        <a
          href="{url}"
          target="_blank"
          rel="noopener noreferrer"
          className="inline-block mt-4 px-6 py-2 bg-blue-600 text-white rounded-lg hover:bg-blue-700"
        >
          View Component on Joko UI
        </a>
      </div>
    </div>
  );
}}

export default {symbol};
"""


def component_symbol(record: ComponentRecord) -> str:
    return _WHITESPACE.sub("", record.name)


def generate_component_code(record: ComponentRecord, language: str = "tsx") -> str:
    # typescript and tsx share the same JSX-bearing template
    return COMPONENT_TEMPLATE.format(
        name=record.name,
        description=record.description,
        category=record.category.value,
        tags=", ".join(record.tags),
        url=record.url or "",
        symbol=component_symbol(record),
    )
