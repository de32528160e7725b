"""
Templating Registries

Centralized registries for loading and caching the static resources behind
every render: HTML shell templates, the stylesheet, and the section layout.
Each resource is read from disk once per registry and reused afterwards.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateError,
    TemplateNotFound,
)
from omegaconf import OmegaConf

from vitae.contexts.templating.exceptions import InvalidSectionConfigError, TemplateRenderError
from vitae.contexts.templating.logger import log_invalid_config, log_resource_loaded

TEMPLATE_PATH = Path(__file__).parent / "template"
STRUCTURE_PATH = TEMPLATE_PATH / "structure"
SECTIONS_CONFIG_PATH = TEMPLATE_PATH / "sections.yaml"
STYLESHEET_NAME = "stylesheet.css"

SECTION_KINDS = {"basics", "named_list", "references", "timeline"}
SLOT_KINDS = {"title", "description", "subtitle", "paragraph", "link", "annex", "list", "chips"}
ANNEX_STYLES = {"text", "plain", "description", "link"}
COLUMNS = ("left", "right")


class TemplateRegistry:
    """
    Registry for loading and caching the Jinja2 templates of the HTML shell.

    Templates live in vitae/contexts/templating/template/structure/{name}.html.jinja.
    Autoescaping is off: every value handed to these templates is a fragment
    that was escaped when it was built.
    """

    def __init__(self, structure_path: Path = None):
        """
        Initialize the template registry.

        Args:
            structure_path: Directory holding shell templates and the stylesheet.
                            Defaults to the packaged template/structure directory
        """
        if structure_path is None:
            structure_path = STRUCTURE_PATH

        self.structure_path = structure_path
        self._cache: Dict[str, Template] = {}
        self._stylesheet: Optional[str] = None

        self.env = Environment(
            loader=FileSystemLoader(str(structure_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            autoescape=False,
            keep_trailing_newline=False,
        )

    def get_template(self, name: str) -> Template:
        """
        Get a template by name, loading and caching it if necessary.

        Args:
            name: Template name without extension (e.g., 'document')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        if name in self._cache:
            return self._cache[name]

        template_file = f"{name}.html.jinja"

        try:
            template = self.env.get_template(template_file)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template not found for '{name}' at {self.get_template_path(name)}"
            ) from e

        log_resource_loaded("template", self.get_template_path(name))
        self._cache[name] = template
        return template

    def get_template_path(self, name: str) -> Path:
        """Get the file path for a shell template."""
        return self.structure_path / f"{name}.html.jinja"

    def render(self, name: str, **context: Any) -> str:
        """
        Render a shell template with already-escaped fragments.

        Raises:
            TemplateRenderError: If Jinja2 fails while rendering (e.g. a missing variable)
        """
        template = self.get_template(name)
        try:
            return template.render(**context)
        except TemplateError as e:
            raise TemplateRenderError(
                f"Failed to render template '{name}'",
                template_name=name,
                template_path=self.get_template_path(name),
                original_error=e,
            ) from e

    def get_stylesheet(self) -> str:
        """
        Get the embedded stylesheet, reading it on first use.

        Raises:
            FileNotFoundError: If the stylesheet is missing
        """
        if self._stylesheet is None:
            stylesheet_path = self.structure_path / STYLESHEET_NAME
            self._stylesheet = stylesheet_path.read_text(encoding="utf-8")
            log_resource_loaded("stylesheet", stylesheet_path)
        return self._stylesheet


class SectionRegistry:
    """
    Registry for the fixed section layout.

    The layout config (template/sections.yaml) lists which resume fields render
    in each column and maps each section's fields onto markup slots. It is
    loaded with OmegaConf, validated once, and cached as plain containers.
    """

    def __init__(self, config_path: Path = None):
        """
        Initialize the section registry.

        Args:
            config_path: Path to the layout config. Defaults to the packaged sections.yaml
        """
        if config_path is None:
            config_path = SECTIONS_CONFIG_PATH

        self.config_path = config_path
        self._config: Optional[Dict[str, Any]] = None

    @property
    def config(self) -> Dict[str, Any]:
        """Validated layout config, loaded on first access."""
        if self._config is None:
            self._config = self._load()
        return self._config

    def _load(self) -> Dict[str, Any]:
        if not self.config_path.exists():
            raise FileNotFoundError(f"Section config not found at {self.config_path}")

        config = OmegaConf.to_container(OmegaConf.load(self.config_path), resolve=True)
        self._validate(config)
        log_resource_loaded("section config", self.config_path)
        return config

    def _fail(self, problem: str) -> None:
        log_invalid_config(self.config_path, problem)
        raise InvalidSectionConfigError(f"{problem} (in {self.config_path})")

    def _validate(self, config: Dict[str, Any]) -> None:
        """
        Check section kinds, slot kinds and column references.

        Raises:
            InvalidSectionConfigError: On the first problem found
        """
        sections = config.get("sections") or {}
        columns = config.get("columns") or {}

        for column in COLUMNS:
            if column not in columns:
                self._fail(f"Missing column '{column}'")
            for section_name in columns[column]:
                if section_name not in sections:
                    self._fail(f"Column '{column}' names unknown section '{section_name}'")

        for section_name, section in sections.items():
            kind = section.get("kind")
            if kind not in SECTION_KINDS:
                self._fail(f"Section '{section_name}' has unknown kind '{kind}'")
            if kind != "basics" and not section.get("title"):
                self._fail(f"Section '{section_name}' needs a title")
            if kind == "named_list" and not section.get("label"):
                self._fail(f"Section '{section_name}' needs a label field")
            if kind == "timeline":
                self._validate_slots(section_name, section.get("slots") or [])

    def _validate_slots(self, section_name: str, slots: List[Dict[str, Any]]) -> None:
        if not slots:
            self._fail(f"Timeline section '{section_name}' has no slots")

        for slot in slots:
            slot_kind = slot.get("kind")
            if slot_kind not in SLOT_KINDS:
                self._fail(f"Section '{section_name}' has unknown slot kind '{slot_kind}'")
            if slot_kind == "annex":
                for part in slot.get("parts") or []:
                    if part.get("style") not in ANNEX_STYLES:
                        self._fail(
                            f"Section '{section_name}' annex part '{part.get('field')}' "
                            f"has unknown style '{part.get('style')}'"
                        )
            elif not slot.get("field"):
                self._fail(f"Section '{section_name}' slot '{slot_kind}' needs a field")

    def get_section(self, section_name: str) -> Dict[str, Any]:
        """
        Get one section's layout.

        Raises:
            KeyError: If the section is not configured
        """
        sections = self.config["sections"]
        if section_name not in sections:
            raise KeyError(f"Section '{section_name}' not found. Available: {list(sections)}")
        return sections[section_name]

    def get_column(self, column: str) -> List[str]:
        """Get the ordered section names for 'left' or 'right'."""
        return list(self.config["columns"][column])
