"""Example component: an icon, exported as a class."""


class Icon:
    name = "Icon"
    props = {"glyph": "string", "size": "number"}

    def render(self, glyph: str, size: int = 16) -> str:
        return f"<i class='icon icon-{glyph}' style='font-size: {size}px'></i>"


default = Icon
