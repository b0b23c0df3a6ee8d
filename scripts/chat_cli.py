#!/usr/bin/env python3
"""Interactive chat CLI for the FRIDAY+ agent service."""

import sys

import httpx
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.prompt import Prompt

AGENT_TITLES = {
    "chat": "🤖 FRIDAY+",
    "weather": "🌦️ FRIDAY+ · weather",
    "news": "📰 FRIDAY+ · news",
}


class ChatCLI:
    """Interactive chat interface backed by a persisted chat."""

    def __init__(self, base_url: str = "http://localhost:8000"):
        """Initialize chat CLI."""
        self.base_url = base_url
        self.chat_id: str | None = None
        self.console = Console()
        self.client = httpx.Client(timeout=90.0)

    def start(self) -> None:
        """Start the interactive chat session."""
        self.console.print(
            Panel.fit(
                "[bold blue]FRIDAY+ - Interactive Chat[/bold blue]\n"
                "Type your messages to chat with the AI co-pilot.\n"
                "Commands: /help, /new, /history, /quit",
                border_style="blue",
            )
        )

        if not self._test_connection():
            self.console.print(f"[red]❌ Cannot connect to the service at {self.base_url}.[/red]")
            return

        self.console.print("[green]✅ Connected to FRIDAY+[/green]\n")

        try:
            while True:
                user_input = Prompt.ask("\n[bold cyan]You[/bold cyan]")

                if user_input.lower() in ["/quit", "/exit", "quit", "exit"]:
                    break
                elif user_input.lower() == "/help":
                    self._show_help()
                    continue
                elif user_input.lower() == "/new":
                    self.chat_id = None
                    self.console.print("[yellow]🔄 Started a new chat[/yellow]")
                    continue
                elif user_input.lower() == "/history":
                    self._show_history()
                    continue
                elif user_input.strip() == "":
                    continue

                response = self._send_message(user_input)
                if response:
                    self._display_response(response)

        except KeyboardInterrupt:
            pass
        finally:
            self.console.print("\n[yellow]👋 Goodbye![/yellow]")
            self.client.close()

    def _test_connection(self) -> bool:
        """Test connection to the service."""
        try:
            response = self.client.get(f"{self.base_url}/health")
            return response.status_code == 200
        except httpx.HTTPError:
            return False

    def _ensure_chat(self) -> str | None:
        """Create a chat on first use."""
        if self.chat_id:
            return self.chat_id

        response = self.client.post(f"{self.base_url}/chats", json={"title": "CLI chat"})
        if response.status_code != 201:
            self.console.print(f"[red]❌ Could not create chat: {response.status_code} - {response.text}[/red]")
            return None

        self.chat_id = response.json()["id"]
        return self.chat_id

    def _send_message(self, message: str) -> dict | None:
        """Send message to the AI service."""
        try:
            chat_id = self._ensure_chat()
            if not chat_id:
                return None

            with self.console.status("[dim]💭 Thinking...[/dim]"):
                response = self.client.post(f"{self.base_url}/chats/{chat_id}/messages", json={"content": message})

            if response.status_code == 200:
                return response.json()

            self.console.print(f"[red]❌ API Error: {response.status_code} - {response.text}[/red]")
            return None

        except httpx.HTTPError as e:
            self.console.print(f"[red]❌ Connection error: {e}[/red]")
            return None

    def _display_response(self, response: dict) -> None:
        """Display AI response with nice formatting."""
        message = response.get("message", {})
        metadata = response.get("metadata", {})
        agent = metadata.get("agent", "chat")

        self.console.print(
            Panel(
                Markdown(message.get("content", "No response")),
                title=f"[bold green]{AGENT_TITLES.get(agent, AGENT_TITLES['chat'])}[/bold green]",
                subtitle=f"[dim]{metadata.get('toolName') or metadata.get('model', '')}[/dim]",
                border_style="green",
                padding=(1, 2),
            )
        )

    def _show_history(self) -> None:
        """Show the stored messages of the current chat."""
        if not self.chat_id:
            self.console.print("[dim]No messages yet.[/dim]")
            return

        response = self.client.get(f"{self.base_url}/chats/{self.chat_id}/messages")
        for message in response.json():
            speaker = "You" if message["role"] == "user" else f"FRIDAY+ ({message.get('agent') or 'chat'})"
            self.console.print(f"[bold]{speaker}:[/bold] {message['content']}")

    def _show_help(self) -> None:
        """Show help information."""
        help_text = """
[bold]Available Commands:[/bold]
• /help - Show this help message
• /new - Start a new chat
• /history - Show messages stored for this chat
• /quit or /exit - Exit the chat

[bold]Try asking:[/bold]
1. "What's the weather in Lagos?"
2. "Any big tech headlines in the UK today?"
3. "Plan my afternoon around the forecast in Paris, in fahrenheit"
        """

        self.console.print(Panel(help_text.strip(), title="[cyan]❓ Help[/cyan]", border_style="cyan"))


def main():
    """Main entry point for the chat CLI."""
    base_url = sys.argv[1] if len(sys.argv) > 1 else "http://localhost:8000"

    chat = ChatCLI(base_url)
    chat.start()


if __name__ == "__main__":
    main()
