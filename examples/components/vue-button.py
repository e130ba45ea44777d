"""Example component: a button."""

default = {
    "name": "Btn",
    "props": {"label": "string", "disabled": "boolean"},
    "template": "<button :disabled='disabled'>{{ label }}</button>",
}
