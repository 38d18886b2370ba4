"""
Desktop game window using pygame.

Hosts a :class:`Session`: pumps input, feeds frame time into the
session, draws the scene and the score/overlay text.
"""

import asyncio
import logging
from typing import Optional

import pygame

from catdash.core.events import Event, EventType
from catdash.core.state import GamePhase
from catdash.desktop.keyboard import KeyboardInput
from catdash.game.session import Session
from catdash.graphics.renderer import Renderer
from catdash.settings import DisplaySettings

logger = logging.getLogger(__name__)

TEXT_COLOR = (83, 83, 83)
OVERLAY_COLOR = (247, 247, 247, 200)


class GameWindow:
    """
    Main game window.

    Keyboard Mapping:
        SPACE / UP: Jump
        DOWN: Fast fall
        RETURN: Start / restart
        ESC: Exit
    """

    def __init__(
        self,
        session: Session,
        display: Optional[DisplaySettings] = None,
        keyboard: Optional[KeyboardInput] = None,
        title: str = "CATDASH",
    ) -> None:
        self.session = session
        self.display = display or session.settings.display
        self.keyboard = keyboard or KeyboardInput()
        self.renderer = Renderer(self.display.width, self.display.height)
        self.title = title

        self._screen: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None
        self._font: pygame.font.Font | None = None
        self._big_font: pygame.font.Font | None = None
        self._running = False

        # HUD state, fed by session events
        self._score_text = "00000"
        self._final_score: Optional[int] = None

        bus = session.event_bus
        self._unsubscribe = [
            bus.subscribe(EventType.SCORE_CHANGED, self._on_score),
            bus.subscribe(EventType.GAME_OVER, self._on_game_over),
            bus.subscribe(EventType.PHASE_CHANGED, self._on_phase),
        ]

        logger.info("GameWindow created")

    # Event handlers
    def _on_score(self, event: Event) -> None:
        self._score_text = event.data["text"]

    def _on_game_over(self, event: Event) -> None:
        self._final_score = event.data["final_score"]

    def _on_phase(self, event: Event) -> None:
        if event.data["new"] == GamePhase.PLAYING:
            self._final_score = None

    # Setup
    def _init_pygame(self) -> None:
        """Initialize pygame and create window."""
        pygame.init()
        pygame.display.set_caption(self.title)

        scale = self.display.scale
        self._screen = pygame.display.set_mode(
            (self.display.width * scale, self.display.height * scale),
            pygame.DOUBLEBUF,
        )
        self._clock = pygame.time.Clock()

        pygame.font.init()
        for font_name in ("Courier New", "DejaVu Sans Mono", "Menlo"):
            try:
                self._font = pygame.font.SysFont(font_name, 24 * scale, bold=True)
                self._big_font = pygame.font.SysFont(font_name, 48 * scale, bold=True)
                break
            except Exception as e:
                logger.debug(f"Font {font_name} failed: {e}")
        if not self._font:
            self._font = pygame.font.SysFont(None, 24 * scale)
            self._big_font = pygame.font.SysFont(None, 48 * scale)

        # First frame so the start overlay has a scene behind it
        self.renderer.render(self.session)
        logger.info(f"Pygame initialized: {self.display.width}x{self.display.height}")

    # Loop
    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False
            elif event.type == pygame.KEYDOWN and event.key in (pygame.K_ESCAPE, pygame.K_q):
                self._running = False
            elif event.type == pygame.WINDOWFOCUSLOST:
                self.keyboard.clear()
            else:
                self.keyboard.handle_event(event)

    def step(self, elapsed_ms: float) -> bool:
        """One host frame: input, session tick, scene render."""
        inp = self.keyboard.sample()
        if self.session.handle_input(inp):
            # Fresh run starts from a zero-length frame
            elapsed_ms = 0.0

        if self.session.tick(elapsed_ms, inp):
            self.renderer.render(self.session)
            return True
        return False

    def _render(self) -> None:
        if not self._screen:
            return

        surface = pygame.surfarray.make_surface(self.renderer.buffer.swapaxes(0, 1))
        if self.display.scale > 1:
            surface = pygame.transform.scale(surface, self._screen.get_size())
        self._screen.blit(surface, (0, 0))

        self._render_score()
        phase = self.session.phase
        if phase == GamePhase.IDLE:
            self._render_overlay("CATDASH", "PRESS ENTER TO START")
        elif phase == GamePhase.OVER:
            self._render_overlay("GAME OVER", f"SCORE {self._final_score}  -  ENTER TO RETRY")

        pygame.display.flip()

    def _render_score(self) -> None:
        text = self._font.render(self._score_text, True, TEXT_COLOR)
        width = self._screen.get_width()
        self._screen.blit(text, (width - text.get_width() - 20, 20))

    def _render_overlay(self, title: str, subtitle: str) -> None:
        w, h = self._screen.get_size()
        panel = pygame.Surface((w, h), pygame.SRCALPHA)
        panel.fill(OVERLAY_COLOR)
        self._screen.blit(panel, (0, 0))

        title_surf = self._big_font.render(title, True, TEXT_COLOR)
        sub_surf = self._font.render(subtitle, True, TEXT_COLOR)
        self._screen.blit(title_surf, ((w - title_surf.get_width()) // 2, h // 2 - title_surf.get_height()))
        self._screen.blit(sub_surf, ((w - sub_surf.get_width()) // 2, h // 2 + 10))

    async def run(self) -> None:
        """Main game loop."""
        self._init_pygame()
        self._running = True

        logger.info("Game window started")

        while self._running:
            self._handle_events()

            elapsed_ms = self._clock.get_time() if self._clock else 0.0
            self.step(elapsed_ms)
            self._render()

            if self._clock:
                self._clock.tick(self.display.fps)

            # Yield to other tasks
            await asyncio.sleep(0)

        self._cleanup()

    def _cleanup(self) -> None:
        for unsubscribe in self._unsubscribe:
            unsubscribe()
        pygame.quit()
        logger.info("Game window stopped")

    def stop(self) -> None:
        """Stop the game loop."""
        self._running = False
