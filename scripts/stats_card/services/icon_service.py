#------------------------------------------------------------
#                       icon_service.py
#        Resolves devicon URLs for language names.

from ..config import ICON_URL_TEMPLATE

# Language names whose devicon slug is not derivable from the name.
LANGUAGE_ICON_MAP = {
    "C++": "cplusplus",
    "C#": "csharp",
    "Jupyter Notebook": "jupyter",
    "CSS": "css3",
    "HTML": "html5",
    "GDScript": "godot",
    "Java": "java",
    "Python": "python",
    "JavaScript": "javascript",
    "TypeScript": "typescript",
    "Shell": "bash",
    "Vim Script": "vim",
}

# This function does derive the devicon slug for a language name.
# Unmapped names are lowercased with spaces removed; the result is not validated.
def resolve_icon_slug(language_name: str) -> str:
    slug = LANGUAGE_ICON_MAP.get(language_name)
    if slug:
        return slug
    return language_name.lower().replace(" ", "")

def resolve_icon_url(language_name: str) -> str:
    return ICON_URL_TEMPLATE.format(slug=resolve_icon_slug(language_name))
