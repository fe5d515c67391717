"""2D generative art with a Processing-style drawing API: colours, shapes,
maths helpers, a windowed sketch loop and a project-starting command."""

__version__ = "0.1.0"