"""
Runtime message schemas exchanged with the selection and menu collaborators
"""
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from .errors import InvalidMessage
from .types import CommandAction, SelectableType


class Command(BaseModel):
	"""
	Request to search or scan a query on a named analyzer
	"""
	model_config = ConfigDict(frozen=True)

	action: CommandAction
	query: str
	type: SelectableType
	name: str


class UpdateContextMenuMessage(BaseModel):
	"""
	Sent whenever the selection changes; `link` is the href of the selected
	anchor, if any
	"""
	model_config = ConfigDict(frozen=True)

	request: Literal['updateContextMenu']
	link: Optional[str] = None
	text: str

	def selected(self, prefer_href_value=True):
		"""
		The string to classify: the link when preferred and present,
		otherwise the selected text
		"""
		if prefer_href_value and self.link:
			return self.link
		return self.text


class CommandMessage(BaseModel):
	"""
	Sent when a context menu item is clicked
	"""
	model_config = ConfigDict(frozen=True)

	request: Literal['command']
	command: Command


Message = Annotated[
	Union[UpdateContextMenuMessage, CommandMessage],
	Field(discriminator='request'),
]

_MESSAGE_ADAPTER = TypeAdapter(Message)


def _validate(adapter_or_model, payload):
	try:
		if isinstance(adapter_or_model, TypeAdapter):
			return adapter_or_model.validate_python(payload)
		return adapter_or_model.model_validate(payload)
	except ValidationError as error:
		raise InvalidMessage(
			f'Invalid message: {error.error_count()} error(s)',
			errors=error.errors(),
		) from error


def parse_message(payload):
	"""
	Validate a raw message mapping against the known message schemas
	"""
	return _validate(_MESSAGE_ADAPTER, payload)


def parse_command(payload):
	"""
	Validate a raw command mapping
	"""
	return _validate(Command, payload)
