from django import forms

from .modes import DEVELOPMENT


class SiteModeSettingsForm(forms.Form):
    """Edits the block toggle and one template (title + message) at a time."""

    enabled = forms.BooleanField(
        label="Ativar modo (bloqueio)",
        required=False,
        help_text="Quando ativo, visitantes verão o template escolhido pelo status atual.",
    )

    def __init__(self, *args, template="maintenance", **kwargs):
        super().__init__(*args, **kwargs)
        self.template = template
        suffix = "Desenvolvimento" if template == DEVELOPMENT else "Manutenção"
        self.fields[f"title_{template}"] = forms.CharField(
            label=f"Título ({suffix})",
            required=False,
            widget=forms.TextInput(attrs={"class": "vTextField"}),
        )
        self.fields[f"message_{template}"] = forms.CharField(
            label=f"Layout/Conteúdo ({suffix})",
            required=False,
            strip=False,
            widget=forms.Textarea(attrs={"rows": 10, "class": "vLargeTextField"}),
            help_text="HTML básico é permitido; scripts e estilos são removidos.",
        )
