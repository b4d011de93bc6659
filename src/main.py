import config  # noqa: F401  # configures logging before anything else logs
from cli.main import cli


def silence_keyboard_interrupt(func):
    def wrapper(*args, **kw):
        try:
            return func(*args, **kw)
        except KeyboardInterrupt:
            pass

    return wrapper


main = silence_keyboard_interrupt(cli)


if __name__ == "__main__":
    main()
