"""Chuck Norris 笑话来源"""

from jokes.base import JokeSource, register_source
from core.models import ChuckNorrisJoke


@register_source
class ChuckNorrisSource(JokeSource):
    """api.chucknorris.io 随机笑话"""

    name = "chuck"
    title = "Chuck Norris joke"
    api_name = "Chuck Norris"
    label = "Chuck Norris Fact"
    summary = "Get a random Chuck Norris fact"
    description = "Fetches a random Chuck Norris fact from api.chucknorris.io"
    endpoint = "https://api.chucknorris.io/jokes/random"
    model = ChuckNorrisJoke
