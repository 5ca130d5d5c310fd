"""
Page structure audit.

Checks the rendered markup of the hero section: the section itself, the
decorative line each action item animates on hover, and accessible names on
the social links.
"""

from typing import List, Optional

from bs4 import BeautifulSoup

from .models import ElementProbe, Issue, IssueCategory, IssueLevel, SkippedCheck, Viewport
from ..utils.constants import (
    ACTION_ITEM_SELECTOR,
    ACTION_LINE_SELECTOR,
    HERO_MIN_HEIGHT_RATIO,
    HERO_SELECTOR,
    SOCIAL_LINK_SELECTOR,
)
from ..utils.log import get_logger


class StructureChecker:
    """
    Checks rendered HTML for the elements the hero section relies on.
    """

    def __init__(
        self,
        hero_selector: str = HERO_SELECTOR,
        action_item_selector: str = ACTION_ITEM_SELECTOR,
        action_line_selector: str = ACTION_LINE_SELECTOR,
        social_link_selector: str = SOCIAL_LINK_SELECTOR
    ):
        self.hero_selector = hero_selector
        self.action_item_selector = action_item_selector
        self.action_line_selector = action_line_selector
        self.social_link_selector = social_link_selector
        self.logger = get_logger("structure")

    def check(self, html: str, skipped: Optional[List[SkippedCheck]] = None) -> List[Issue]:
        """
        Check HTML content for structural issues.

        Only elements that are present are judged. A page without the hero
        section is recorded in ``skipped`` rather than reported as an issue.

        Args:
            html: Rendered HTML of the page
            skipped: Optional list receiving insufficient-information notes

        Returns:
            Issues in check order: action items, social links
        """
        issues: List[Issue] = []

        try:
            soup = BeautifulSoup(html, 'lxml')
        except Exception:
            soup = BeautifulSoup(html, 'html.parser')

        self._check_hero(soup, skipped)
        self._check_action_items(soup, issues)
        self._check_social_links(soup, issues)

        return issues

    def _check_hero(self, soup: BeautifulSoup, skipped: Optional[List[SkippedCheck]]) -> None:
        if soup.select_one(self.hero_selector) is not None:
            return
        self.logger.warning(f"Hero section {self.hero_selector} not found in rendered HTML")
        if skipped is not None:
            skipped.append(SkippedCheck(
                category=IssueCategory.UI,
                element=self.hero_selector.lstrip('.'),
                reason="Insufficient information: hero section not rendered",
            ))

    def _check_action_items(self, soup: BeautifulSoup, issues: List[Issue]) -> None:
        base = self.action_item_selector.lstrip('.')
        for index, item in enumerate(soup.select(self.action_item_selector)):
            if item.select_one(self.action_line_selector) is None:
                issues.append(Issue(
                    category=IssueCategory.UI,
                    level=IssueLevel.WARNING,
                    element=f"{base}-{index}",
                    description="Action line not found",
                    suggestion=(
                        f"Ensure {self.action_line_selector} element exists "
                        "for hover effects"
                    ),
                ))

    def _check_social_links(self, soup: BeautifulSoup, issues: List[Issue]) -> None:
        base = self.social_link_selector.lstrip('.')
        for index, link in enumerate(soup.select(self.social_link_selector)):
            text = link.get_text(strip=True)
            aria_label = (link.get('aria-label') or '').strip()
            title = (link.get('title') or '').strip()
            if not text and not aria_label and not title:
                issues.append(Issue(
                    category=IssueCategory.ACCESSIBILITY,
                    level=IssueLevel.WARNING,
                    element=f"{base}-{index}",
                    description="Link has no accessible name",
                    suggestion="Add an aria-label describing the link target",
                ))


def audit_structure(
    html: str,
    checker: Optional[StructureChecker] = None,
    skipped: Optional[List[SkippedCheck]] = None
) -> List[Issue]:
    """Run the structure checks with default selectors unless a checker is given."""
    return (checker or StructureChecker()).check(html, skipped)


def audit_hero_height(
    hero: Optional[ElementProbe],
    viewport: Viewport,
    min_ratio: float = HERO_MIN_HEIGHT_RATIO
) -> List[Issue]:
    """
    Flag a hero section noticeably shorter than the viewport.

    Args:
        hero: Probe of the hero section, or None when it is absent
        viewport: Viewport the hero was measured at
        min_ratio: Minimum hero height as a fraction of viewport height

    Returns:
        A single ui Issue, or an empty list
    """
    if hero is None or hero.geometry.height >= viewport.height * min_ratio:
        return []
    return [Issue(
        category=IssueCategory.UI,
        level=IssueLevel.WARNING,
        element=hero.label,
        description="Hero section may not be full height",
        suggestion="Consider using min-height: 100vh for better visual impact",
        details={
            "height": round(hero.geometry.height, 2),
            "viewportHeight": viewport.height,
        },
    )]
