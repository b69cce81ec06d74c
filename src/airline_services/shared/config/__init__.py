from .settings import TicketSettings as TicketSettings
