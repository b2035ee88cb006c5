"""
Icon lookup for the UI.

Maps the icon names used by the front end to Lucide icon identifiers and
renders them as `<i data-lucide="...">` placeholders.
"""
import re
from dataclasses import dataclass
from html import escape
from typing import Optional

ICON_NAMES = (
    "Home", "Zap", "Brush", "LayoutGrid", "Settings", "Star", "Heart", "Bot",
    "ImageIcon", "Search", "X", "Sparkles", "Wand2", "Info", "RefreshCcw",
    "BookOpen", "Laptop", "Smartphone", "Tablet", "ShieldCheck", "KeyRound",
    "PlusCircle", "Trash2", "Users", "Send", "Trophy", "Mic", "Volume2",
    "UserPlus", "Menu", "Box", "Camera", "List", "Filter", "Truck", "PieChart",
    "BarChart3", "Undo2", "ShoppingCart", "Package", "HelpCircle", "Copy",
    "CreditCard", "UserCircle", "Ban",
)

# Names that don't follow the PascalCase -> kebab-case rule
LUCIDE_ALIASES = {
    "ImageIcon": "image",
}


def to_lucide_id(name: str) -> str:
    """BarChart3 -> bar-chart-3"""
    if name in LUCIDE_ALIASES:
        return LUCIDE_ALIASES[name]
    return re.sub(r"(?<!^)(?=[A-Z0-9])", "-", name).lower()


@dataclass(frozen=True)
class Icon:
    name: str
    lucide: str

    def render(self, **attrs) -> str:
        extra = "".join(
            f' {escape(key.rstrip("_").replace("_", "-"))}="{escape(str(value))}"'
            for key, value in attrs.items()
        )
        return f'<i data-lucide="{self.lucide}"{extra}></i>'


ICONS = {name: Icon(name=name, lucide=to_lucide_id(name)) for name in ICON_NAMES}


def resolve(name: str) -> Optional[Icon]:
    """Return the icon for a known name, None otherwise."""
    return ICONS.get(name)
