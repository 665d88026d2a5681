"""
Feedback conversation state.

Holds the resume-feedback conversation, which feedback cards the user picked
for the next draft (with optional notes), and the two persona chat logs.
"""

from dataclasses import dataclass, field

from candor.contexts.coaching.chat import ChatMessage, MODEL_ROLE
from candor.contexts.coaching.narrative_data_structure import StrategicAnalysis


@dataclass
class FeedbackSession:
    """
    Mutable feedback state for one narrative cycle.

    Attributes:
        messages: Full conversation (user questions and model feedback), oldest first
        selected_ids: Ids of feedback cards chosen for the next draft
        context: Card id -> free-text note the user attached to it
        oliver_chat: Oliver's persona log
        steve_chat: Steve's persona log
        automated_analysis: Whether persona reactions are recorded after each feedback round
    """

    messages: list[ChatMessage] = field(default_factory=list)
    selected_ids: set[str] = field(default_factory=set)
    context: dict[str, str] = field(default_factory=dict)
    oliver_chat: list[ChatMessage] = field(default_factory=list)
    steve_chat: list[ChatMessage] = field(default_factory=list)
    automated_analysis: bool = True

    # =========================================================================
    # CONVERSATION
    # =========================================================================

    def add_user_message(self, text: str) -> ChatMessage:
        message = ChatMessage.from_user(text)
        self.messages.append(message)
        return message

    def add_feedback(self, items) -> list[ChatMessage]:
        """Append one model message per feedback item and return them."""
        new_messages = [ChatMessage.from_model(item, prefix="feedback") for item in items]
        self.messages.extend(new_messages)
        return new_messages

    def add_error(self, error_message: str) -> ChatMessage:
        message = ChatMessage.from_model(f"Sorry, an error occurred: {error_message}", prefix="err")
        self.messages.append(message)
        return message

    def feedback_cards(self) -> list[ChatMessage]:
        """Model messages, in conversation order."""
        return [message for message in self.messages if message.role == MODEL_ROLE]

    def get_message(self, message_id: str) -> ChatMessage:
        for message in self.messages:
            if message.id == message_id:
                return message
        raise KeyError(f"Unknown feedback message: {message_id}")

    def get_card(self, message_id: str) -> ChatMessage:
        """
        Look up a feedback card by id.

        Raises:
            KeyError: If the id is unknown or belongs to a user message
        """
        for card in self.feedback_cards():
            if card.id == message_id:
                return card
        raise KeyError(f"Not a feedback card: {message_id}")

    def clear_feedback(self) -> None:
        """Drop the conversation together with any selection and notes on it."""
        self.messages = []
        self.clear_selection()
        self.context = {}

    # =========================================================================
    # SELECTION
    # =========================================================================

    def toggle_selection(self, message_id: str) -> bool:
        """
        Select or deselect a feedback card.

        Returns:
            True if the card is selected after the call

        Raises:
            KeyError: If the id is not a feedback card
        """
        self.get_card(message_id)
        if message_id in self.selected_ids:
            self.selected_ids.discard(message_id)
            return False
        self.selected_ids.add(message_id)
        return True

    def set_context(self, message_id: str, text: str) -> None:
        """Attach a note to a feedback card (replaces any earlier note)."""
        self.get_card(message_id)
        self.context[message_id] = text

    def selected_messages(self) -> list[ChatMessage]:
        """Selected cards in conversation order."""
        return [message for message in self.messages if message.id in self.selected_ids]

    def selected_context(self) -> dict[str, str]:
        """Notes belonging to selected cards only."""
        return {
            message_id: note
            for message_id, note in self.context.items()
            if message_id in self.selected_ids
        }

    def clear_selection(self) -> None:
        self.selected_ids = set()

    # =========================================================================
    # PERSONAS
    # =========================================================================

    def record_strategic_analysis(self, analysis: StrategicAnalysis, force: bool = False) -> bool:
        """
        Append Oliver's and Steve's reactions to their chat logs.

        Skipped unless automated_analysis is on or force is set.

        Returns:
            True if the reactions were recorded
        """
        if not (self.automated_analysis or force):
            return False
        self.oliver_chat.append(ChatMessage.from_model(analysis.olivers_perspective, prefix="oliver"))
        self.steve_chat.append(ChatMessage.from_model(analysis.steves_perspective, prefix="steve"))
        return True

    def reset(self) -> None:
        """Forget everything except the automated_analysis preference."""
        self.clear_feedback()
        self.oliver_chat = []
        self.steve_chat = []
