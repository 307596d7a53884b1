from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from jinja2 import Environment, PackageLoader, TemplateError, select_autoescape

from janatonese_web.domain.models import FallbackContent
from janatonese_web.repositories.output_repository import OutputRepository

logger = logging.getLogger(__name__)

TEMPLATE_NAME = "fallback.html"

DEFAULT_FALLBACK_CONTENT = FallbackContent(
    title="Janatonese - Flutter Messaging App",
    heading="Janatonese",
    subtitle="A Secure Messaging App with Three-Number Encryption",
    description=(
        "This Flutter-based application is not available in this deployment yet.",
        "Janatonese uses a unique TOTP-based encryption system that encrypts "
        "messages as sets of three numbers for enhanced security.",
    ),
    features_heading="Key Features:",
    features=(
        "Secure messaging with Three-Number encryption",
        "Firebase authentication and real-time database",
        "Contact management with shared secrets",
        "Real-time message updates",
        "Both encrypted and decrypted message views",
    ),
    footer=(
        "To run the complete Flutter application, please ensure Flutter "
        "is installed correctly on your system."
    ),
)


def default_environment() -> Environment:
    return Environment(
        loader=PackageLoader("janatonese_web", "templates"),
        autoescape=select_autoescape(["html"]),
        keep_trailing_newline=True,
    )


@dataclass
class FallbackPageRenderer:
    """
    Renders the placeholder page served when no real build exists.
    Output depends only on `content` and the template, never on the
    request or the environment.
    """
    content: FallbackContent = DEFAULT_FALLBACK_CONTENT
    env: Optional[Environment] = None

    def render(self) -> str:
        env = self.env or default_environment()
        return env.get_template(TEMPLATE_NAME).render(page=self.content)


@dataclass
class FallbackService:
    output_repo: OutputRepository
    renderer: FallbackPageRenderer = field(default_factory=FallbackPageRenderer)

    def write_fallback(self) -> bool:
        """
        Writes the placeholder index.html, replacing anything already there.
        Failures are logged, not raised: the server keeps running and serves
        whatever the output directory holds.
        """
        try:
            self.output_repo.ensure_exists()
            path = self.output_repo.write_index(self.renderer.render())
        except (OSError, TemplateError) as e:
            logger.error("Could not write placeholder app to %s: %s", self.output_repo.index_path, e)
            return False

        logger.info("Placeholder app written to %s", path)
        return True
