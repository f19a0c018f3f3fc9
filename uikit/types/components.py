"""
The MIT License (MIT)

Copyright (c) 2015-present Rapptz

Permission is hereby granted, free of charge, to any person obtaining a
copy of this software and associated documentation files (the "Software"),
to deal in the Software without restriction, including without limitation
the rights to use, copy, modify, merge, publish, distribute, sublicense,
and/or sell copies of the Software, and to permit persons to whom the
Software is furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in
all copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS
OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING
FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER
DEALINGS IN THE SOFTWARE.
"""

from __future__ import annotations

from typing import List, Literal, TypedDict, Union

from typing_extensions import NotRequired

ComponentType = Literal[1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 17, 18, 19, 20]
SelectMenuType = Literal[3, 5, 6, 7, 8]
ButtonStyle = Literal[1, 2, 3, 4, 5, 6]
ButtonSize = Literal['small', 'medium', 'large']
TextStyle = Literal[1, 2]
ModalSize = Literal['small', 'medium', 'large']
DefaultValueType = Literal['user', 'role', 'channel']


class PartialEmoji(TypedDict, total=False):
    name: str
    id: str
    animated: bool


class ActionRow(TypedDict):
    type: Literal[1]
    components: List[Component]
    id: NotRequired[int]


class ButtonComponent(TypedDict):
    type: Literal[2]
    label: str
    style: ButtonStyle
    disabled: bool
    emoji: NotRequired[PartialEmoji]
    url: NotRequired[str]
    custom_id: NotRequired[str]
    sku_id: NotRequired[str]
    id: NotRequired[int]
    tooltip: NotRequired[str]
    badge: NotRequired[int]
    loading: NotRequired[bool]
    size: NotRequired[ButtonSize]


class SelectOption(TypedDict):
    value: str
    description: str
    default: bool
    label: NotRequired[str]
    emoji: NotRequired[PartialEmoji]


class SelectDefaultValues(TypedDict):
    id: str
    type: DefaultValueType


class SelectMenu(TypedDict):
    type: SelectMenuType
    placeholder: str
    max_values: int
    disabled: bool
    custom_id: NotRequired[str]
    min_values: NotRequired[int]
    default_values: NotRequired[List[SelectDefaultValues]]
    options: NotRequired[List[SelectOption]]
    channel_types: NotRequired[List[int]]
    id: NotRequired[int]
    searchable: NotRequired[bool]
    grouped: NotRequired[bool]


class TextInput(TypedDict):
    type: Literal[4]
    custom_id: str
    label: str
    style: TextStyle
    required: bool
    placeholder: NotRequired[str]
    value: NotRequired[str]
    min_length: NotRequired[int]
    max_length: NotRequired[int]
    id: NotRequired[int]
    validation_pattern: NotRequired[str]
    masked: NotRequired[bool]


class Modal(TypedDict):
    type: Literal[18]
    custom_id: str
    title: str
    components: List[Component]
    size: NotRequired[ModalSize]
    closable: NotRequired[bool]


class Tab(TypedDict):
    id: str
    label: str
    content: Component
    badge: NotRequired[int]
    icon: NotRequired[PartialEmoji]


class Tabs(TypedDict):
    type: Literal[19]
    custom_id: str
    tabs: List[Tab]
    default_tab: NotRequired[str]


class AccordionItem(TypedDict):
    id: str
    title: str
    content: Component
    open: NotRequired[bool]


class Accordion(TypedDict):
    type: Literal[20]
    custom_id: str
    items: List[AccordionItem]
    multiple: NotRequired[bool]


class PlaceholderComponent(TypedDict):
    type: Literal[9, 10, 11, 12, 13, 14, 17]


Component = Union[
    ActionRow,
    ButtonComponent,
    SelectMenu,
    TextInput,
    Modal,
    Tabs,
    Accordion,
    PlaceholderComponent,
]
