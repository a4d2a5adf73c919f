"""Capabilities shared by every command handler."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from nextkit.config import Config
from nextkit.fs import FileSystem, LocalFileSystem
from nextkit.installer import CommandResult, PackageInstaller, SubprocessRunner
from nextkit.prompts import DefaultsPrompter, Prompter, RichPrompter
from nextkit.scaffolder.templates import TemplateRenderer
from nextkit.utils import console, print_info, print_success, print_warning


@dataclass
class CommandContext:
    """Everything a command needs from the outside world.

    Handlers receive a context instead of reading the working directory,
    the terminal or ``subprocess`` themselves, so tests can swap in fakes.
    """

    config: Config
    fs: FileSystem
    prompter: Prompter
    installer: PackageInstaller
    renderer: TemplateRenderer = field(default_factory=TemplateRenderer)

    @classmethod
    def from_config(cls, config: Config) -> "CommandContext":
        """Bind the production capabilities to ``config.root_dir``."""
        fs = LocalFileSystem(config.root_dir)
        prompter: Prompter = DefaultsPrompter() if config.assume_yes else RichPrompter()
        installer = PackageInstaller(
            fs=fs,
            runner=SubprocessRunner(),
            root_dir=config.root_dir,
            package_manager=config.package_manager,
        )
        return cls(config=config, fs=fs, prompter=prompter, installer=installer)

    def install(self, packages: Sequence[str], label: str, *, dev: bool = False) -> CommandResult | None:
        """Install *packages* and report the outcome.

        A failed install is only a warning: whatever was scaffolded before it
        stays in place.  Returns ``None`` when installs are disabled.
        """
        if self.config.skip_install:
            print_warning(f"Skipping {label} installation (install disabled).")
            return None

        print_info(f"Installing {label}...")
        result = self.installer.install(packages, dev=dev)
        if result.success:
            print_success(f"{label} installed successfully!")
        else:
            print_warning(f"Error installing {label}. Check your setup.")
            if result.output:
                console.print(result.output, markup=False, highlight=False)
        return result
