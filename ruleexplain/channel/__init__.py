from ruleexplain.channel.base import BaseContractChannel
from ruleexplain.channel.factory import ChannelFactory
from ruleexplain.channel.models import SubmissionReceipt

__all__ = ["BaseContractChannel", "ChannelFactory", "SubmissionReceipt"]
