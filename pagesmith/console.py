import colorama
from colorama import Fore, Style

colorama.init()

verbose_cli = False

SUCCESS = f"{Fore.GREEN}{Style.BRIGHT}✓{Style.RESET_ALL}"
INFO = f"{Fore.BLUE}{Style.BRIGHT}i{Style.RESET_ALL}"


def path(value: str) -> str:
    return f"{Fore.CYAN}{value}{Style.RESET_ALL}"


def ext(value: str) -> str:
    return f"{Fore.YELLOW}{value}{Style.RESET_ALL}"


def print_banner() -> None:
    def cool(l: str, r: str) -> None:
        print(f"{Fore.GREEN}{l}{Fore.CYAN}{r}{Style.RESET_ALL}")

    cool("                        ", "          _ _   _     ")
    cool(" _ __   __ _  __ _  ___ ", " ___ _ __ (_) |_| |__  ")
    cool("| '_ \\ / _` |/ _` |/ _ \\", "/ __| '_ \\| | __| '_ \\ ")
    cool("| |_) | (_| | (_| |  __/", "\\__ \\ | | | | |_| | | |")
    cool("| .__/ \\__,_|\\__, |\\___|", "|___/_| |_|_|\\__|_| |_|")
    cool("|_|          |___/      ", "                       ")


def verbose(msg: str) -> None:
    if verbose_cli:
        print(msg)


def describe(msg: str) -> None:
    print(msg)


def notify(msg: str) -> None:
    print(f"{Fore.BLUE}{msg}{Style.RESET_ALL}")


def watching(msg: str) -> None:
    print(f"{Fore.MAGENTA}{Style.BRIGHT}Watching: {Style.RESET_ALL}{msg}")


def success(msg: str) -> None:
    print(f"{Fore.GREEN}{Style.BRIGHT}{msg}{Style.RESET_ALL}")


def warning(msg: str, filename: str = "") -> None:
    pos = f" in {filename}" if filename else ""
    print(f"{Fore.YELLOW}{Style.BRIGHT}Warning: {Style.RESET_ALL}{msg}{pos}")


def error(msg: str, filename: str = "", detail: str = "") -> None:
    """Report a failure without stopping the build"""
    pos = f" in {filename}" if filename else ""
    print(f"\n{Fore.RED}{Style.BRIGHT}Error: {Style.RESET_ALL}{msg}{pos}")
    if detail:
        print(f"{Style.DIM}{detail.rstrip()}{Style.RESET_ALL}")
    print()
