"""Field discovery - one typed Field per interactive control on the current step"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

import linkedin_autofill.config as config
from linkedin_autofill.reasoning.normalize import normalize_label
from linkedin_autofill.reasoning.options import Option


class FieldKind(Enum):
    TEXT = "text"
    NUMBER = "number"
    DROPDOWN = "dropdown"
    RADIO = "radio"


# Question log answer type per field kind
ANSWER_TYPES = {
    FieldKind.TEXT: "text",
    FieldKind.NUMBER: "number",
    FieldKind.DROPDOWN: "dropdown",
    FieldKind.RADIO: "dropdown",
}


@dataclass
class RadioChoice:
    option: Option
    input: object
    label: Optional[object] = None


@dataclass
class Field:
    kind: FieldKind
    label: str
    element: object = None
    value: str = ""
    options: List[Option] = field(default_factory=list)
    choices: List[RadioChoice] = field(default_factory=list)
    custom: bool = False
    raw_label: str = ""

    @property
    def answer_type(self):
        return ANSWER_TYPES[self.kind]

    def is_filled(self):
        """Pre-filled controls are never overwritten."""
        value = (self.value or "").strip()
        if self.kind is FieldKind.DROPDOWN:
            return bool(value) and value != config.DROPDOWN_PLACEHOLDER
        return bool(value)


def read_label(driver, element, root=None):
    """Caption for a control: <label for=id>, falling back to aria-label"""
    element_id = driver.attribute(element, "id")
    if element_id:
        label = driver.locate_one(f'label[for="{element_id}"]', root)
        if label is not None:
            return driver.text(label)
    return (driver.attribute(element, "aria-label") or "").strip()


def is_usable(driver, element):
    """Hidden and disabled controls are skipped"""
    return driver.is_visible(element) and not driver.is_disabled(element)


def _input_field(driver, element, custom=False):
    raw = read_label(driver, element)
    input_type = (driver.attribute(element, "type") or "text").lower()
    kind = FieldKind.NUMBER if input_type == "number" else FieldKind.TEXT
    return Field(
        kind=kind,
        label=normalize_label(raw),
        element=element,
        value=driver.value(element) or "",
        custom=custom,
        raw_label=raw,
    )


def _dropdown_field(driver, element, custom=False):
    raw = read_label(driver, element)
    options = [
        Option(text=driver.text(opt), value=driver.attribute(opt, "value") or "")
        for opt in driver.locate_all(config.SELECTORS["options"], element)
    ]
    return Field(
        kind=FieldKind.DROPDOWN,
        label=normalize_label(raw),
        element=element,
        value=driver.value(element) or "",
        options=options,
        custom=custom,
        raw_label=raw,
    )


def _radio_field(driver, fieldset):
    radios = driver.locate_all(config.SELECTORS["radio_inputs"], fieldset)
    if not radios:
        return None

    legend = driver.locate_one(config.SELECTORS["legend"], fieldset)
    raw = driver.text(legend) if legend is not None else ""

    choices = []
    checked_value = ""
    for radio in radios:
        radio_id = driver.attribute(radio, "id")
        label = driver.locate_one(f'label[for="{radio_id}"]', fieldset) if radio_id else None
        value = driver.attribute(radio, "value") or ""
        text = driver.text(label) if label is not None else value
        choices.append(RadioChoice(option=Option(text=text, value=value), input=radio, label=label))
        if not checked_value and driver.is_checked(radio):
            checked_value = value or text

    return Field(
        kind=FieldKind.RADIO,
        label=normalize_label(raw),
        element=fieldset,
        value=checked_value,
        options=[choice.option for choice in choices],
        choices=choices,
        raw_label=raw,
    )


def discover_fields(driver):
    """
    Enumerate every visible, enabled control on the current step, in this order:
    standard text inputs, standard dropdowns, radio groups (one per fieldset),
    then custom text inputs and textareas, custom numeric inputs and custom
    dropdowns outside the form-builder classes.

    Always queries the live DOM; never reuse the result across steps.
    """
    selectors = config.SELECTORS
    fields = []

    for element in driver.locate_all(selectors["text_inputs"]):
        if is_usable(driver, element):
            fields.append(_input_field(driver, element))

    for element in driver.locate_all(selectors["dropdowns"]):
        if is_usable(driver, element):
            fields.append(_dropdown_field(driver, element))

    for fieldset in driver.locate_all(selectors["radio_fieldsets"]):
        if not is_usable(driver, fieldset):
            continue
        radio_field = _radio_field(driver, fieldset)
        if radio_field is not None:
            fields.append(radio_field)

    for key in ("custom_text_inputs", "custom_number_inputs"):
        for element in driver.locate_all(selectors[key]):
            if is_usable(driver, element):
                fields.append(_input_field(driver, element, custom=True))

    for element in driver.locate_all(selectors["custom_dropdowns"]):
        if is_usable(driver, element):
            fields.append(_dropdown_field(driver, element, custom=True))

    return fields
