#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""Abstract base class for installer UI implementations."""

from abc import ABC, abstractmethod


class InstallerUI(ABC):
    """Abstract base class for installer UI implementations.

    This interface decouples the installer logic from the presentation layer,
    so parameter resolution and the confirmation gate run the same code whether
    answers come from a terminal or from defaults and environment overrides.
    """

    @property
    @abstractmethod
    def is_interactive(self) -> bool:
        """True when answers are read from a user."""
        pass

    @abstractmethod
    def ask_yes_no(self, message: str, default: bool = True) -> bool:
        """Ask the user a yes/no question.

        Args:
            message: The question to ask the user
            default: Answer used when the user just presses enter (or cannot be asked)

        Returns:
            True for yes, False for no
        """
        pass

    @abstractmethod
    def ask_string(self, prompt: str, default: str = "") -> str:
        """Ask the user for a string input.

        Args:
            prompt: The prompt to show the user
            default: Value used when the user just presses enter (or cannot be asked)

        Returns:
            The user's input string
        """
        pass

    @abstractmethod
    def display_message(self, message: str) -> None:
        """Display a (possibly multi-line) message to the user."""
        pass
