"""Dad joke 笑话来源"""

from jokes.base import JokeSource, register_source
from core.models import DadJoke


@register_source
class DadJokeSource(JokeSource):
    """icanhazdadjoke.com 随机笑话"""

    name = "dad"
    title = "dad joke"
    api_name = "dad joke"
    label = "Dad Joke"
    summary = "Get a random dad joke"
    description = "Fetches a random dad joke from icanhazdadjoke.com"
    endpoint = "https://icanhazdadjoke.com/"
    model = DadJoke
