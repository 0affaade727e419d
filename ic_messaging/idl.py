"""
Candid interface of the messaging canister, as consumed by ic-py's Canister.
"""

MESSAGING_DID = """
type Message = record {
  sender : text;
  receiver : text;
  content : text;
  timestamp : int;
};

service : {
  sendMessage : (text, text, text) -> (bool);
  receiveMessages : (text) -> (vec Message) query;
  editMessage : (text, nat, text) -> (bool);
  deleteUserMessages : (text) -> (bool);
  clearMessages : () -> (bool);
  harassmentLevel : (text) -> (text);
  suggestImprovedMessage : (text) -> (text);
  validateKey : (text, text) -> (bool);
}
"""

MESSAGE_FIELDS = ("sender", "receiver", "content", "timestamp")


def idl_hash(label: str) -> int:
    """Candid field-label hash: fold of UTF-8 bytes with h * 223 + b, mod 2**32."""
    h = 0
    for b in label.encode("utf-8"):
        h = (h * 223 + b) % (1 << 32)
    return h
