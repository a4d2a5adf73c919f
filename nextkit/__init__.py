"""nextkit -- boilerplate scaffolding for existing Next.js projects."""

__version__ = "1.0.0"
