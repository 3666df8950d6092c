# vaporsnakes/display.py
import logging

import pygame
import pygame_gui

import config
from vaporsnakes.render import Renderer
from vaporsnakes.simulation import Simulation

logger = logging.getLogger(__name__)


class Display:
    """The pygame side of the simulation: window, clock, input and HUD."""

    def __init__(self, screen):
        self.screen = screen
        width, height = screen.get_size()
        self.simulation = Simulation(width, height)
        self.renderer = Renderer()
        self.is_running = False
        self.clock = pygame.time.Clock()
        self.show_hud = True
        self.gui_manager = pygame_gui.UIManager((width, height))
        self.fps_font = pygame.font.SysFont(config.HUD_FONT, config.HUD_FONT_SIZE)
        self.stats_label = pygame_gui.elements.UILabel(
            relative_rect=pygame.Rect((10, 10), (420, 20)), text=self.stats_text(),
            manager=self.gui_manager)

    def stats_text(self):
        world = self.simulation.world
        return (f"Atoms: {len(world.alive_atoms())}  Snakes: {len(world.snakes)}  "
                f"Photons: {len(world.photons)}  Black holes: {len(world.black_holes)}")

    def run(self):
        self.is_running = True
        while self.is_running:
            time_delta = self.clock.tick(config.FPS) / 1000.0
            self.handle_events()
            commands = self.simulation.tick(pygame.time.get_ticks())
            self.gui_manager.update(time_delta)
            if self.simulation.tick_counter % config.HUD_UPDATE_RATE == 0:
                self.stats_label.set_text(self.stats_text())
            self.draw(commands)

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT: self.is_running = False
            self.gui_manager.process_events(event)
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.is_running = False
                elif event.key == pygame.K_h:
                    self.toggle_hud()
            if event.type == pygame.VIDEORESIZE:
                self.resize(event.w, event.h)
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.simulation.spawn_snake_at(*event.pos)

    def toggle_hud(self):
        self.show_hud = not self.show_hud
        if self.show_hud:
            self.stats_label.show()
        else:
            self.stats_label.hide()

    def resize(self, width, height):
        # Nothing of the previous frame is kept, the next tick repaints everything.
        self.screen = pygame.display.get_surface()
        self.simulation.resize(width, height)
        self.gui_manager.set_window_resolution((width, height))

    def draw(self, commands):
        self.renderer.draw(self.screen, commands)
        if self.show_hud:
            self.gui_manager.draw_ui(self.screen)
            fps_surface = self.fps_font.render(f"FPS: {self.clock.get_fps():.0f}", True, config.HUD_TEXT_COLOR)
            self.screen.blit(fps_surface, (10, 35))
        pygame.display.flip()
