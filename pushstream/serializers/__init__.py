from .json import JSONSerializer


DefaultSerializer = JSONSerializer()
