#!/usr/bin/env python3
"""
Rendering chunks into different regions of a page layout.

Run with: python examples/template_example.py
"""

import html

from postchunks import (
    Document,
    FilterRegistry,
    TransformPipeline,
    attach_chunks,
    get_chunk,
    have_chunks,
    the_chunk,
)


POST = """<p>Our spring menu is here.<!--more--></p>
<h2>Starters</h2><p>Asparagus, peas, mint.</p>
<!--more-->
<h2>Mains</h2><p>Lamb with wild garlic.</p>
"""

# Separator and transforms live in explicit registries, not global state
hooks = FilterRegistry()
hooks.add_filter("postchunks_separator", lambda sep, doc: doc.metadata.get("separator", sep))

pipeline = TransformPipeline(hooks)
pipeline.register("render", str.strip)
pipeline.register("plain", lambda text: html.escape(text.strip()))


def render_page(post: Document) -> None:
    attach_chunks(post, resolver=hooks.resolver())

    # Region 1: the lead, by index
    print("<header>", get_chunk(post, 1, pipeline=pipeline), "</header>", sep="\n")

    # Region 2: everything else, in order, through the cursor
    get_chunk(post)
    print("<main>")
    while have_chunks(post):
        the_chunk(post, pipeline=pipeline)
        print()
    print("</main>")

    # Region 3: the lead again as escaped text for a meta tag
    print(f'<meta name="description" content="{get_chunk(post, 1, "plain", pipeline)}">')


if __name__ == "__main__":
    render_page(Document(POST, doc_id="spring-menu"))
