from concerts.clients.tickets import HttpTicketsClient, TicketsClient

__all__ = ["HttpTicketsClient", "TicketsClient"]
