"""Rich rendering engine - prints evaluation results as events arrive."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from machi.engine.event import Event, EventBus, EventType
from machi.rules.waits import PRE_WIN_HAND_SIZE
from machi.ui.i18n import shape_label, t
from machi.ui.tile_display import tiles_to_rich_text


class Renderer:
    """Subscribes to evaluator events and draws them on the console."""

    def __init__(self, console: Console, event_bus: EventBus):
        self.console = console
        self.event_bus = event_bus
        self._subscribe_events()

    def _subscribe_events(self):
        self.event_bus.subscribe(EventType.HAND_PARSED, self._on_hand_parsed)
        self.event_bus.subscribe(EventType.WAITS_CALCULATED, self._on_waits)
        self.event_bus.subscribe(EventType.EMPTY_INPUT, self._on_empty)
        self.event_bus.subscribe(EventType.INPUT_REJECTED, self._on_rejected)

    def render_title(self):
        self.console.print(Panel(
            f"[bold cyan]{t('label.title')}[/bold cyan]\n"
            f"[dim]{t('label.subtitle')}[/dim]",
            border_style="cyan",
            padding=(1, 4),
        ))

    def _on_hand_parsed(self, event: Event):
        hand = event.data["hand"]
        label = t('label.random_hand') if event.data.get("is_random") else t('label.hand')
        line = Text(f"  {label}: ")
        line.append_text(tiles_to_rich_text(hand.tiles()))
        line.append(f"  ({t('label.tile_count', n=len(hand))})", style="dim")
        self.console.print(line)
        if len(hand) != PRE_WIN_HAND_SIZE:
            self.console.print(f"  [yellow]{t('msg.not_13', n=len(hand))}[/yellow]")

    def _on_waits(self, event: Event):
        waits = event.data["waits"]
        if not waits:
            self.console.print(f"  [red]{t('msg.no_waits')}[/red]")
            return

        tiles = ", ".join(w.tile.name for w in waits)
        self.console.print(f"  [bold green]{t('msg.waits', tiles=tiles)}[/bold green]")
        for w in waits:
            line = Text("    ")
            line.append_text(tiles_to_rich_text([w.tile], highlight=True))
            line.append("  " + " / ".join(shape_label(s) for s in w.shapes), style="dim")
            self.console.print(line)
            for decomposition in w.decompositions:
                self.console.print(f"        [dim]{decomposition.name}[/dim]")

    def _on_empty(self, event: Event):
        self.console.print(f"  [yellow]{t('msg.empty_hand')}[/yellow]")

    def _on_rejected(self, event: Event):
        self.console.print(f"  [red]{t('msg.invalid_input', error=escape(str(event.data['error'])))}[/red]")
