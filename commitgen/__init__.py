"""
Commit Message Generator

Git hook that writes a conventional commit message for the staged changes.
"""

__version__ = "1.0.0"

# Conventional commit types, in the order they are shown to the model
# Used by: prompts/builder.py, messages.py (validation), output (colors)
COMMIT_TYPES = {
    'feat': 'New feature',
    'fix': 'Bug fix',
    'docs': 'Documentation updates',
    'style': 'Code style changes',
    'refactor': 'Code refactoring',
    'test': 'Test updates',
    'chore': 'Maintenance tasks',
    'build': 'Build system changes',
    'ci': 'CI configuration changes',
    'perf': 'Performance improvements',
    'revert': 'Revert previous commit',
}

COMMIT_TYPE_NAMES = list(COMMIT_TYPES.keys())

# Hard limit for the whole message, which is a single subject line
MAX_MESSAGE_LENGTH = 72
