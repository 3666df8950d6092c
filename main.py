# main.py
import logging

import pygame

import config
from vaporsnakes.display import Display

logger = logging.getLogger("vaporsnakes")


def main():
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    pygame.init()
    flags = pygame.RESIZABLE | pygame.DOUBLEBUF
    try:
        screen = pygame.display.set_mode(config.WINDOW_SIZE, flags, vsync=0)
    except pygame.error as exc:
        logger.critical("Could not open a drawing surface: %s", exc)
        pygame.quit()
        raise SystemExit(1) from exc
    pygame.display.set_caption(config.WINDOW_CAPTION)

    display = Display(screen)
    display.run()

    pygame.quit()

if __name__ == '__main__':
    main()
