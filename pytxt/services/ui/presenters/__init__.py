from __future__ import annotations

from .main_presenter import FORMAT_CHOICES, IMainView, MainPresenter

__all__ = ["FORMAT_CHOICES", "IMainView", "MainPresenter"]
