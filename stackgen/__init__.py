"""stackgen -- interactive scaffolding generator for React Vite + Express and Next.js projects."""

__version__ = "0.1.0"
