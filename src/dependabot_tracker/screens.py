"""The screens of the dashboard. Each carries only the data it renders."""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel

from dependabot_tracker.models import Repository


class Screen(BaseModel):
    model_config = {"frozen": True}

    label: ClassVar[str] = ""
    key_hint: ClassVar[str] = ""

    def navigation_label(self) -> str:
        return self.label


class Overview(Screen):
    label: ClassVar[str] = "Overview"
    key_hint: ClassVar[str] = (
        "(r) to view repositories / (u) to update repositories / (q) to quit"
    )


class RepositoryList(Screen):
    label: ClassVar[str] = "Repository List"
    key_hint: ClassVar[str] = (
        "(↑/↓) to navigate / (enter) to view repository / (q) to quit / "
        "(o) to view overview / (u) to update repositories"
    )


class RepositoryDetail(Screen):
    key_hint: ClassVar[str] = (
        "(q) to quit / (r) to view repositories / (tab) to switch tabs"
    )

    repository: Repository

    def navigation_label(self) -> str:
        return self.repository.name


class AlertDetail(Screen):
    key_hint: ClassVar[str] = (
        "(↑/↓) to scroll / (t) to jump to top / (q) to quit / "
        "(o) to view overview / (tab) to switch tabs"
    )

    repository: Repository

    def navigation_label(self) -> str:
        return self.repository.name


class ConfirmRefresh(Screen):
    label: ClassVar[str] = "Updating"
    key_hint: ClassVar[str] = "(y/n) to confirm update"


class Refreshing(Screen):
    label: ClassVar[str] = "Updating"
    key_hint: ClassVar[str] = "Fetching repositories... (q) to quit"
