from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from playwright.async_api import Browser, Playwright, async_playwright

from ..models.render import RenderOptions, RenderOutcome, RenderResult
from ..settings import Settings

log = logging.getLogger("mermaid.batch.renderers.playwright")

_PAGE_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <style>
    body { margin: 0; padding: 0; background: transparent; }
    .diagram { display: inline-block; }
  </style>
</head>
<body><div id="container"></div></body>
</html>
"""

# Runs inside the page. One holder div per definition; failures are settled per definition.
_RENDER_SCRIPT = """
async ({ definitions, prefix, mermaidConfig, css }) => {
  const config = Object.assign({}, mermaidConfig || {});
  if (css) {
    config.themeCSS = [config.themeCSS, css].filter(Boolean).join('\\n');
  }
  window.mermaid.initialize(Object.assign(
    { fontFamily: 'arial,sans-serif' },
    config,
    { startOnLoad: false },
  ));

  const root = document.getElementById('container');
  const results = [];
  for (let i = 0; i < definitions.length; i++) {
    const id = `${prefix}-${i}`;
    const holder = document.createElement('div');
    holder.className = 'diagram';
    root.appendChild(holder);
    try {
      const { svg } = await window.mermaid.render(id, definitions[i]);
      holder.innerHTML = svg;
      const el = holder.querySelector('svg');
      const box = el ? el.getBoundingClientRect() : { width: 0, height: 0 };
      const title = el && el.querySelector(':scope > title');
      const desc = el && el.querySelector(':scope > desc');
      results.push({
        status: 'fulfilled',
        value: {
          id,
          svg,
          width: box.width,
          height: box.height,
          title: title ? title.textContent : null,
          description: desc ? desc.textContent : null,
        },
      });
    } catch (error) {
      holder.remove();
      results.push({ status: 'rejected', reason: String(error && error.message || error) });
    }
  }
  return results;
}
"""

def page_arguments(definitions: List[str], options: RenderOptions, prefix: str) -> Dict[str, Any]:
    """Argument for the in-page script; options that were not given are left out."""
    payload = options.to_payload()
    args: Dict[str, Any] = {"definitions": list(definitions), "prefix": prefix}
    if "mermaid_config" in payload:
        args["mermaidConfig"] = payload["mermaid_config"]
    if "css" in payload:
        args["css"] = payload["css"]
    return args

class MermaidRenderer:
    """
    Renders Mermaid definitions to SVG in headless Chromium.

    The browser is launched on first use and kept for the lifetime of the
    ``async with`` block; each call gets a fresh page.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or Settings()
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None

    async def __aenter__(self) -> "MermaidRenderer":
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()

    async def _ensure_browser(self) -> Browser:
        if self._browser is None:
            self._playwright = await async_playwright().start()
            launch_kwargs: Dict[str, Any] = {"headless": True}
            if self.settings.browser_executable:
                launch_kwargs["executable_path"] = self.settings.browser_executable
            if self.settings.browser_args:
                launch_kwargs["args"] = list(self.settings.browser_args)
            log.debug("browser.launch", extra={"launch": launch_kwargs})
            self._browser = await self._playwright.chromium.launch(**launch_kwargs)
        return self._browser

    async def close(self) -> None:
        if self._browser is not None:
            await self._browser.close()
            self._browser = None
        if self._playwright is not None:
            await self._playwright.stop()
            self._playwright = None

    async def __call__(self, definitions: List[str], options: RenderOptions) -> List[RenderOutcome]:
        browser = await self._ensure_browser()
        page = await browser.new_page()
        try:
            await page.set_content(_PAGE_HTML)
            if self.settings.mermaid_js_path:
                await page.add_script_tag(path=self.settings.mermaid_js_path)
            else:
                await page.add_script_tag(url=self.settings.mermaid_js_url)
            if options.css:
                await page.add_style_tag(content=options.css)

            raw = await page.evaluate(
                _RENDER_SCRIPT, page_arguments(definitions, options, self.settings.id_prefix)
            )

            outcomes: List[RenderOutcome] = []
            for item in raw:
                if item.get("status") != "fulfilled":
                    outcomes.append(RenderOutcome.rejected(item.get("reason") or "unknown error"))
                    continue
                value = RenderResult(**item["value"])
                if options.screenshot and value.id:
                    value.screenshot = await page.locator(f"svg#{value.id}").screenshot(
                        type="png", omit_background=True
                    )
                outcomes.append(RenderOutcome.fulfilled(value))
            return outcomes
        finally:
            await page.close()
