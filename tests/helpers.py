"""Syntax tree builders in the shape the Solidity parser emits, for tests."""


def elementary(name):
    return {"type": "ElementaryTypeName", "name": name}


def user_defined(path):
    return {"type": "UserDefinedTypeName", "namePath": path}


def array(base, length=None):
    node = {"type": "ArrayTypeName", "baseTypeName": base, "length": None}
    if length is not None:
        node["length"] = {"type": "NumberLiteral", "number": str(length)}
    return node


def param(type_name, name=None, storage=None):
    return {
        "type": "Parameter",
        "typeName": type_name,
        "name": name,
        "storageLocation": storage,
    }


def function(name, line, params=(), returns=None, visibility="external"):
    return {
        "type": "FunctionDefinition",
        "name": name,
        "visibility": visibility,
        "parameters": list(params),
        "returnParameters": list(returns) if returns else None,
        "loc": {"start": {"line": line, "column": 2}, "end": {"line": line, "column": 40}},
    }


def source_unit(*functions, contract="IToken"):
    return {
        "type": "SourceUnit",
        "children": [
            {"type": "PragmaDirective", "name": "solidity", "value": "0.8.27"},
            {
                "type": "ContractDefinition",
                "name": contract,
                "subNodes": list(functions),
            },
        ],
    }


TOKEN_SOURCE = """\
pragma solidity 0.8.27;

interface IToken {
  /// @notice Transfers tokens
  /// @param to Recipient
  function transfer(address to) external;

  /// @notice Returns a balance
  /// @dev Reads from storage
  /// @param owner Account to query
  /// @return balance The balance of `owner`
  function balanceOf(address owner) external view returns (uint256 balance);
}
"""

TOKEN_TREE = source_unit(
    function("transfer", 6, [param(elementary("address"), "to")]),
    function(
        "balanceOf",
        12,
        [param(elementary("address"), "owner")],
        [param(elementary("uint256"), "balance")],
    ),
)

TOKEN_ABI = [
    {
        "type": "function",
        "name": "balanceOf",
        "inputs": [{"name": "owner", "type": "address", "internalType": "address"}],
        "outputs": [
            {"name": "balance", "type": "uint256", "internalType": "uint256"}
        ],
        "stateMutability": "view",
    },
    {
        "type": "function",
        "name": "transfer",
        "inputs": [{"name": "to", "type": "address", "internalType": "address"}],
        "outputs": [],
        "stateMutability": "nonpayable",
    },
    {
        "type": "event",
        "name": "Transfer",
        "inputs": [{"name": "to", "type": "address", "indexed": True}],
        "anonymous": False,
    },
]


