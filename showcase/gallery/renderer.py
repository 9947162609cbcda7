"""Renders project cards to a static, filterable HTML page."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from pathlib import Path

from jinja2 import Environment

from showcase.config.models import OutputConfig
from showcase.gallery.models import ProjectCard, StatusOption, TagFilterGroup
from showcase.vcs.models import RepoInfo

logger = logging.getLogger(__name__)

_jinja_env = Environment(autoescape=True, trim_blocks=True, lstrip_blocks=True)

INDEX_TEMPLATE = _jinja_env.from_string("""\
<!DOCTYPE html>
<html lang="en" class="dark">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{{ title }}</title>
<script src="https://cdn.tailwindcss.com"></script>
<style>
  [hidden] { display: none !important; }
  .chip[aria-pressed="true"] { outline: 2px solid currentColor; }
</style>
</head>
<body class="min-h-screen bg-neutral-950 text-neutral-100">
<main class="mx-auto max-w-7xl px-4 py-12 sm:px-6 lg:px-8">
  <header class="mb-12">
    <h1 class="text-4xl font-bold sm:text-5xl">{{ title }}</h1>
    <p class="max-w-2xl text-lg text-neutral-400">
      A collection of projects in various stages of completion. Use the filters below to explore by name, status, or technology.
    </p>
    {% if repo %}
    <p class="mt-2 text-sm text-neutral-500">Source: <a class="underline" href="{{ repo.url }}">{{ repo.full_name }}</a></p>
    {% endif %}
  </header>

  <section class="mb-6 flex flex-col gap-4 rounded-lg border border-neutral-800 p-4">
    <div class="flex flex-col gap-3 sm:flex-row sm:flex-wrap sm:items-end">
      <label class="flex flex-col gap-1 text-sm font-medium">Search
        <input id="search" type="search" placeholder="Search by project name" class="h-10 rounded-md border border-neutral-700 bg-neutral-900 px-3 sm:w-64">
      </label>
      <label class="flex flex-col gap-1 text-sm font-medium">Status
        <select id="status" class="h-10 rounded-md border border-neutral-700 bg-neutral-900 px-3 sm:w-48">
          <option value="all">All</option>
          {% for option in statuses %}
          <option value="{{ option.value }}">{{ option.label }}</option>
          {% endfor %}
        </select>
      </label>
      {% if groups %}
      <div class="relative flex flex-col gap-1 text-sm font-medium" id="tag-dropdown">
        <span>Tags</span>
        <button id="tag-toggle" type="button" aria-haspopup="listbox" aria-expanded="false" class="flex h-10 items-center rounded-md border border-neutral-700 bg-neutral-900 px-3 sm:w-56">
          <span id="tag-summary">All tags</span>
        </button>
        <div id="tag-panel" hidden class="absolute top-full z-20 mt-2 max-h-80 w-64 overflow-y-auto rounded-md border border-neutral-700 bg-neutral-900 p-3 shadow-lg">
          <div class="mb-2 flex justify-between text-xs font-semibold uppercase text-neutral-400">
            <span>Tag Categories</span>
            <button id="tag-clear" type="button" hidden>Clear</button>
          </div>
          {% for group in groups %}
          <div class="mb-3">
            <p class="mb-1 text-xs font-semibold uppercase text-neutral-400">{{ group.label }}</p>
            <div class="flex flex-wrap gap-2">
              {% for tag in group.tags %}
              <button type="button" class="chip rounded-full px-2 py-0.5 text-xs {{ tag.classes }}" data-tag="{{ tag.value }}" aria-pressed="false">{{ tag.label }}</button>
              {% endfor %}
            </div>
          </div>
          {% endfor %}
        </div>
      </div>
      {% endif %}
    </div>
    <div class="flex justify-end"><button id="reset" type="button" hidden class="text-sm text-neutral-400 hover:underline">Clear filters</button></div>
  </section>

  <p id="empty" hidden class="rounded-lg border border-dashed border-neutral-700 p-8 text-center text-neutral-400">No projects match your filters.</p>

  <div id="cards" class="grid grid-cols-1 gap-6 md:grid-cols-2 lg:grid-cols-3">
    {% for card in cards %}
    <a class="card block rounded-lg border border-neutral-800 p-6 transition hover:border-neutral-500"
       href="{{ card.href }}"{% if card.is_external %} target="_blank" rel="noopener noreferrer"{% endif %}
       data-name="{{ card.name|lower }}" data-status="{{ card.status|lower }}" data-tags='{{ card.tags|map("lower")|list|tojson }}'>
      <div class="mb-2 flex items-start justify-between">
        <span class="rounded-lg p-2 {{ card.folder_classes }}">&#128193;</span>
        <span class="rounded-full border border-neutral-700 px-2 text-xs capitalize">{{ card.status }}</span>
      </div>
      <h2 class="text-xl font-semibold">{{ card.name }}</h2>
      {% if card.description %}<p class="mt-1 text-sm text-neutral-400">{{ card.description }}</p>{% endif %}
      {% if card.tags %}
      <div class="mt-4 flex flex-wrap gap-2">
        {% for tag in card.tags %}<span class="rounded-full bg-neutral-800 px-2 py-0.5 text-xs {{ card.classes_for(tag) }}">{{ tag }}</span>{% endfor %}
      </div>
      {% endif %}
    </a>
    {% endfor %}
  </div>
</main>
<script>
(function () {
  var state = { search: "", status: "all", tags: [], open: false };
  var search = document.getElementById("search");
  var status = document.getElementById("status");
  var dropdown = document.getElementById("tag-dropdown");
  var toggle = document.getElementById("tag-toggle");
  var panel = document.getElementById("tag-panel");
  var summary = document.getElementById("tag-summary");
  var clearTags = document.getElementById("tag-clear");
  var reset = document.getElementById("reset");
  var empty = document.getElementById("empty");
  var cards = Array.prototype.slice.call(document.querySelectorAll(".card"));
  var chips = Array.prototype.slice.call(document.querySelectorAll(".chip"));

  function apply() {
    var term = state.search.trim().toLowerCase();
    var shown = 0;
    cards.forEach(function (card) {
      var tags = JSON.parse(card.dataset.tags);
      var ok = card.dataset.name.indexOf(term) !== -1 &&
        (state.status === "all" || card.dataset.status === state.status) &&
        state.tags.every(function (t) { return tags.indexOf(t) !== -1; });
      card.hidden = !ok;
      if (ok) shown++;
    });
    empty.hidden = shown !== 0;
    chips.forEach(function (chip) {
      chip.setAttribute("aria-pressed", state.tags.indexOf(chip.dataset.tag) !== -1 ? "true" : "false");
    });
    var n = state.tags.length;
    if (summary) summary.textContent = n === 0 ? "All tags" : n + " tag" + (n > 1 ? "s" : "") + " selected";
    if (clearTags) clearTags.hidden = n === 0;
    reset.hidden = !(term || state.status !== "all" || n > 0);
  }

  function setOpen(open) {
    state.open = open;
    if (!panel) return;
    panel.hidden = !open;
    toggle.setAttribute("aria-expanded", open ? "true" : "false");
  }

  search.addEventListener("input", function () { state.search = search.value; apply(); });
  status.addEventListener("change", function () { state.status = status.value; apply(); });
  chips.forEach(function (chip) {
    chip.addEventListener("click", function () {
      var value = chip.dataset.tag;
      var i = state.tags.indexOf(value);
      if (i === -1) state.tags.push(value); else state.tags.splice(i, 1);
      apply();
    });
  });
  if (toggle) toggle.addEventListener("click", function () { setOpen(!state.open); });
  if (clearTags) clearTags.addEventListener("click", function () { state.tags = []; apply(); });
  reset.addEventListener("click", function () {
    state.search = ""; state.status = "all"; state.tags = [];
    search.value = ""; status.value = "all";
    apply();
  });
  document.addEventListener("mousedown", function (event) {
    if (state.open && dropdown && !dropdown.contains(event.target)) setOpen(false);
  });
  document.addEventListener("keydown", function (event) {
    if (state.open && event.key === "Escape") setOpen(false);
  });
  apply();
})();
</script>
</body>
</html>
""")


class GalleryRenderer:
    """Writes the gallery to disk as index.html (plus projects.json).

    Handles directory creation, the optional JSON dump and dry-run mode.
    """

    def __init__(self, config: OutputConfig) -> None:
        self.config = config
        self.base_dir = Path(config.base_dir)

    def render(
        self,
        cards: Sequence[ProjectCard],
        groups: Sequence[TagFilterGroup],
        statuses: Sequence[StatusOption],
        repo: RepoInfo | None = None,
    ) -> str:
        return INDEX_TEMPLATE.render(
            title=self.config.title,
            cards=cards,
            groups=groups,
            statuses=statuses,
            repo=repo,
        )

    def write(
        self,
        cards: Sequence[ProjectCard],
        groups: Sequence[TagFilterGroup],
        statuses: Sequence[StatusOption],
        repo: RepoInfo | None = None,
        *,
        dry_run: bool = False,
    ) -> Path:
        """Write the gallery page. Returns the Path of the written (or would-be) file."""
        dest = self.base_dir / "index.html"

        if dry_run:
            logger.debug("dry-run: would write %s", dest)
            return dest

        html = self.render(cards, groups, statuses, repo)
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text(html, encoding="utf-8")
        logger.info("wrote %s (%d cards)", dest, len(cards))

        if self.config.write_json:
            self._write_json(cards)

        return dest

    def _write_json(self, cards: Sequence[ProjectCard]) -> None:
        json_path = self.base_dir / "projects.json"
        payload = [card.model_dump() for card in cards]
        json_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        logger.debug("wrote %s", json_path)
